"""
Click Tracking App

Records visitor interactions with call-to-action elements on the public site
(call, email, WhatsApp, website and social links) for the dashboard's click
statistics.
"""
