# data/seed.py
# Sample data written on first load of each storage key
from datetime import date

SAMPLE_PRODUCTS = [
    {"id": "1", "name": "Cotton T-Shirt", "category": "T-Shirt", "stock": 150, "price": 599, "gst": "18%", "condition": "New"},
    {"id": "2", "name": "Polo T-Shirt", "category": "T-Shirt", "stock": 120, "price": 799, "gst": "18%", "condition": "New"},
    {"id": "3", "name": "Denim Jeans", "category": "Pants", "stock": 80, "price": 1299, "gst": "18%", "condition": "New"},
    {"id": "4", "name": "Cargo Pants", "category": "Pants", "stock": 60, "price": 1599, "gst": "18%", "condition": "New"},
    {"id": "5", "name": "Running Shoes", "category": "Shoes", "stock": 45, "price": 2499, "gst": "18%", "condition": "New"},
    {"id": "6", "name": "Casual Sneakers", "category": "Shoes", "stock": 35, "price": 1899, "gst": "18%", "condition": "New"},
    {"id": "7", "name": "Smart Watch", "category": "Watches", "stock": 25, "price": 4999, "gst": "18%", "condition": "New"},
    {"id": "8", "name": "Analog Watch", "category": "Watches", "stock": 40, "price": 2299, "gst": "18%", "condition": "New"},
    {"id": "9", "name": "Leather Belt", "category": "Accessories", "stock": 70, "price": 899, "gst": "18%", "condition": "New"},
    {"id": "10", "name": "Sunglasses", "category": "Accessories", "stock": 55, "price": 1199, "gst": "18%", "condition": "New"},
]

SAMPLE_TEAM_MEMBERS = [
    {"id": "1", "name": "John Doe", "email": "john.doe@shippy.com",
     "phone": "+91 9876543210", "role": "Admin", "joinDate": "2024-01-15"},
    {"id": "2", "name": "Jane Smith", "email": "jane.smith@shippy.com",
     "phone": "+91 9876543211", "role": "Manager", "joinDate": "2024-02-20"},
    {"id": "3", "name": "Mike Johnson", "email": "mike.johnson@shippy.com",
     "phone": "+91 9876543212", "role": "Employee", "joinDate": "2024-03-10"},
]

# Paid history shown under the salary cards (display only)
SALARY_HISTORY = [
    {"month": "July 2025", "amount": 3500, "status": "Paid", "date": "2025-07-25"},
    {"month": "June 2025", "amount": 3500, "status": "Paid", "date": "2025-06-25"},
    {"month": "May 2025", "amount": 3500, "status": "Paid", "date": "2025-05-25"},
    {"month": "April 2025", "amount": 3500, "status": "Paid", "date": "2025-04-25"},
]


def default_salary(today: date) -> dict:
    return {
        "currentSalary": 45000,
        "nextSalaryDate": "2025-08-25",
        "nextSalaryAmount": 3500,
        "totalEarnings": 170000,
        "lastUpdate": today.isoformat(),
    }
