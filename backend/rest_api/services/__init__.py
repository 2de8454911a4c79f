"""
Services module for business logic.

- query/: filter criteria, field tables, filtering, sorting, pagination
- crud/: generic CRUDService and patch documents
- domain/: one service per entity type - USE THESE from routers

Usage:
    from rest_api.services.domain import TransactionService
    service = TransactionService(db)
    transactions = service.get(filters, page_size=20, sort_field="amount", sort_order="desc")
"""
