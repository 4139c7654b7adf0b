"""Print a bearer token for calling the API.

Usage:
    python create_token.py [subject] [lifetime_days]
"""
import sys

from order_management_api.app.core.security import create_access_token

subject = sys.argv[1] if len(sys.argv) > 1 else "admin"
days = int(sys.argv[2]) if len(sys.argv) > 2 else 365
token = create_access_token({"sub": subject}, expires_delta=days * 24 * 60 * 60)
print(token)
