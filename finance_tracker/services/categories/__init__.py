from finance_tracker.services.categories.categories_service import CategoriesService  # noqa: F401
