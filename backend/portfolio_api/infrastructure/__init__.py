"""Infrastructure Layer: database sessions, SMTP transport, rate-limit store, logging.

Invariants:
    - External calls map their failures to PortfolioError subclasses (core/errors.py)
    - Long-lived objects (store, sweeper, mail sender) are created by the lifespan,
      never at import time
"""
