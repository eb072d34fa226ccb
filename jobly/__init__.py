"""
Jobly: companies and jobs backed by a relational store.
"""
