"""Fetching version information and installing FXServer artifacts."""