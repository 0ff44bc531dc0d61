"""
Gemini Relay package.

Provides:
- FastAPI relay forwarding prompts to the Gemini generateContent API
- A static page that calls the relay
"""
