"""
Contact Submissions App

Handles contact form submissions from the public marketing site:

Features:
- Public contact form submission with field-level validation
- Storage of every submission for the internal dashboard
- Optional staff notification email (Celery task)
"""
