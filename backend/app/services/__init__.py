# Services package init
"""
Promptopia Backend — Services Layer
=====================================

What:  Business logic between routes (HTTP) and the database.

Service Inventory:
    - PromptService: lists a user's prompts with creators populated
"""
