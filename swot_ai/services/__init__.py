"""Business logic services.

This module contains:
- prompts: action templates and Gemini response schemas
- relay: the single outbound call to Gemini and response adaptation
"""
