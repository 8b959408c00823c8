"""
Domain Layer - EPC QR payload rules

This layer contains:
- Scheme constants (service tag, versions, character sets, field limits)
- Value objects (the EUR amount)
- Field-level and record-level validation
- The PaymentRecord builder

Key principle: ZERO dependencies on I/O
The payload can be built and tested without a QR renderer or a bank.
"""
