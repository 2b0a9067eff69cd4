"""
PyElectron Comlink Test Suite

Unit tests for the message adapter, its context detection,
listener registry, capability shim and loopback transport.
"""
