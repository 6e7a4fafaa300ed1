"""
httpcli - send a single HTTP request from the command line.

Supports GET, POST, PUT and DELETE with custom headers and a request body
taken either from the command line or from a file.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

__version__ = "1.1.0"
__author__ = "DNS Science.io"
__copyright__ = "Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company"
