"""
Slotly

A FastAPI-based booking service for single-occupancy time slots,
with token authentication, requester/provider roles, and an appointment
status workflow.
"""

__version__ = "1.0.0"
