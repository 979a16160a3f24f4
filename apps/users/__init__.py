"""Employees: credentials, sessions, access levels and profiles."""
