"""
Command-line interface for Helpdesk RAG.
"""
