"""
Harvest app

Purpose: pull projects and time entries from the Harvest time-tracking
API, convert them into project records, and keep the local project table
in sync. Sync runs through Django-Q.
"""
