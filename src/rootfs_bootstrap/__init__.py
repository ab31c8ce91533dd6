"""rootfs-bootstrap: Debian-family root filesystem bootstrap step."""

__version__ = "0.1.0"
