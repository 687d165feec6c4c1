"""Test configuration and fixtures."""

import logfire

# Keep spans local; the app instruments FastAPI at import time
logfire.configure(send_to_logfire=False, console=False)
