"""SFTP response bodies, packet framing and error status replies."""