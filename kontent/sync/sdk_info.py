"""Package identification sent with every request."""

SDK_NAME = "kontent-sync"
SDK_VERSION = "0.1.0"
SDK_HOST = "pypi.org"
