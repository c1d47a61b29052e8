"""Application layer DTOs"""

from src.service.ticketing.app.dto.purchase_summary import PurchaseSummary

__all__ = ['PurchaseSummary']
