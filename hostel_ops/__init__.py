"""
Hostel facility desk: complaint intake, cleaner dispatch and electrician
ticketing for a college hostel.
"""

__version__ = "0.1.0"
