"""SFTP request bodies and the request packet parser."""