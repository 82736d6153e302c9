pytest_plugins = ["rental_search.testing.fixtures"]
