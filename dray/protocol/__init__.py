"""Wire primitives, file attributes, requests and responses of the SFTP protocol."""