"""Runtime client-secret bootstrap for Entra ID web applications."""
