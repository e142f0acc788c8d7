"""
Test suite for Slotly.

Contains unit and integration tests for authentication, authorization
and the appointment workflow.
"""
import os

# Set environment for testing
os.environ["TESTING"] = "1"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["SEED_DEMO_DATA"] = "0"
