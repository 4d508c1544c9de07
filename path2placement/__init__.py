"""
Path2Placement
Placement statistics, prediction and resume analysis for students.

Architecture:
- Backend API: auth, placement model, college search, resume analysis
- Supabase Postgres: historical placement records (read-only)
- This package: session handling and chart-ready shaping of both sources
"""

__version__ = "1.0.0"
__author__ = "Student"
