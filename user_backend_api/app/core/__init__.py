"""
Cross‑cutting pieces of the application: settings, logging setup,
error envelopes and the CORS middleware.
"""
