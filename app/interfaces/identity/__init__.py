"""Identity interface: login, credential verification, profile and feeds."""
