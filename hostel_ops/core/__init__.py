"""
Cross-cutting infrastructure: logging, security, errors, middleware and
notification delivery.
"""
