"""Dog Sitter backend functions package.

Hosts the change-event notification dispatcher and the payment functions
consumed by the mobile client.
"""
