"""Network helper for the startup banner.

Returns the LAN address other devices on the network can use to open the
planner page.
"""
import socket


def get_local_ip() -> str:
    """Return a non-loopback local IP address if possible, otherwise '127.0.0.1'.

    Connecting a UDP socket only asks the OS which interface it would route
    through; nothing is sent.
    """
    s = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    try:
        s.connect(("8.8.8.8", 80))
        ip = str(s.getsockname()[0])
    except OSError:
        ip = "127.0.0.1"
    finally:
        s.close()
    return ip
