from .factory import create_test_data, generate_random_data

__all__ = ["create_test_data", "generate_random_data"]
