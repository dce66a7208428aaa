"""
Command Line Interface Package

Command Structure:
- llc-tracker: Main entry point with utility commands (version, config)
- llc-tracker mortgage: Schedule import, reconciled schedule and summary
"""
