"""Route Modules: one file per resource.

Invariants:
    - Each module defines its own APIRouter with prefix and tags
    - Contact routes delegate the submission flow to services/contact_submission.py
"""
