# logic/overview.py
from datetime import date

from shippy.data.seed import default_salary
from shippy.data.store import PRODUCTS_KEY, SALARY_KEY, TEAM_KEY, RecordStore

# Shown before the products / team screens have ever been opened
FALLBACK_PRODUCT_COUNT = 847
FALLBACK_TEAM_COUNT = 3

# Growth figure per calendar month (Jan..Dec)
MONTHLY_GROWTH = [15.2, 18.7, 23.4, 19.8, 25.1, 21.3, 28.9, 23.4, 20.1, 26.7, 22.5, 24.8]

RECENT_ACTIVITY = [
    {"action": "Added new T-shirt stock", "time": "2 hours ago", "type": "success"},
    {"action": "Updated shoe prices", "time": "4 hours ago", "type": "info"},
    {"action": "Processed salary payment", "time": "1 day ago", "type": "success"},
    {"action": "Added new watch collection", "time": "2 days ago", "type": "info"},
]


def overview_stats(store: RecordStore, today: date) -> dict:
    """Dashboard cards. Reads storage without seeding anything."""
    def count(key, fallback):
        return len(store.load(key)) if store.exists(key) else fallback

    salary = store.load(SALARY_KEY) or default_salary(today)

    return {
        "total_earnings": salary["totalEarnings"],
        "product_count": count(PRODUCTS_KEY, FALLBACK_PRODUCT_COUNT),
        "team_count": count(TEAM_KEY, FALLBACK_TEAM_COUNT),
        "monthly_growth": MONTHLY_GROWTH[today.month - 1],
        "next_salary_amount": salary["nextSalaryAmount"],
        "next_salary_date": date.fromisoformat(salary["nextSalaryDate"]),
    }
