"""Networking value types: IP addresses, hostnames and connect, recv and send statuses."""