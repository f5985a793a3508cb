"""Catalogue use cases: products and customers"""
from .products import ListProducts, AddProduct, UpdateProduct, DeleteProduct
from .customers import ListCustomers, AddCustomer, UpdateCustomer, DeleteCustomer
from .dtos import (
    AddProductCommandDTO,
    UpdateProductCommandDTO,
    ProductDTO,
    AddCustomerCommandDTO,
    UpdateCustomerCommandDTO,
    CustomerDTO,
    DeletedDTO,
)

__all__ = [
    "ListProducts",
    "AddProduct",
    "UpdateProduct",
    "DeleteProduct",
    "ListCustomers",
    "AddCustomer",
    "UpdateCustomer",
    "DeleteCustomer",
    "AddProductCommandDTO",
    "UpdateProductCommandDTO",
    "ProductDTO",
    "AddCustomerCommandDTO",
    "UpdateCustomerCommandDTO",
    "CustomerDTO",
    "DeletedDTO",
]
