"""Library for managing FXServer artifacts, server data and the dxm installation."""

__version__ = "0.1.1"