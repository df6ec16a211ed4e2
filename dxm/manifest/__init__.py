"""Structures of the dxm.toml manifest."""