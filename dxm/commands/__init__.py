"""Namespace for command-line sub-commands; none are included."""