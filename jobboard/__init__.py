"""
Freshers Job Board
Job postings API with AI-assisted resume checks and a daily email digest.

Architecture:
- MongoDB: Job postings and subscribers
- Generative AI: Resume ATS feedback and chat only (no data is stored)
- SMTP: Subscription confirmations and the daily digest
"""

__version__ = "1.0.0"
