"""
Utility modules for the product summary panel
"""
from .config_loader import ProductSummaryConfig, load_product_summary_config
