"""sshhop - build ssh jump-host chains for a single ProxyCommand."""

__version__ = "0.1.0"
