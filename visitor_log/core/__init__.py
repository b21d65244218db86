"""
Core building blocks shared by the server: domain models, validation,
the visitor repository contract, logging and monitoring.
"""
