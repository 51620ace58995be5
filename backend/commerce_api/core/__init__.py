"""
Core - configuration, database wiring and logging
"""
