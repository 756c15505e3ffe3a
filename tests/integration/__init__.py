"""
Integration tests for the send-email Lambda.
"""
