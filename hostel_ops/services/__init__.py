"""
Service layer.

Services enforce the complaint and ticket lifecycle, take the caller as an
explicit ``Principal`` and raise ``hostel_ops.services.errors`` exceptions.
Import concrete services from their modules.
"""
