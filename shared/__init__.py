"""
Shared Kernel

Building blocks shared by the desk and meeting room contexts: value
objects for booking slots, the domain error taxonomy and the API
exception handler that maps those errors to HTTP responses.
"""
