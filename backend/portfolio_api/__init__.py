"""Portfolio API package: projects, skills and the contact form behind the portfolio site.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
