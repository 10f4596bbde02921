"""School Fee Management package.

Organized by feature modules (students, fees, receipts, transport, ...) with a
thin Flask controller layer over service/repository layers.
"""
