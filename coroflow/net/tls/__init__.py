"""Status enumerations for TLS connections, receives and sends."""