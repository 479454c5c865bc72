"""
Cross-app test suite for the lead capture backend.

Test Organization:
- test_storage.py - storage contract, run against every backend
- test_api_client.py - HTTP clients with a mocked transport
- integration/ - end-to-end flows through the public and dashboard APIs
- App-specific tests remain in their respective app directories (e.g., contact/tests.py)
"""
