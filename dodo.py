def task_example():
    """Grow the default preset and show it in rerun"""
    return {
        'actions': ['python examples/plant.py bush'],
        'verbosity': 2,
    }

def task_example_toml():
    """Grow the plant defined in examples/bush.toml"""
    return {
        'actions': ['python examples/plant.py examples/bush.toml'],
        'verbosity': 2,
    }

def task_test():
    """Run the test suite"""
    return {
        'actions': ['pytest tests'],
        'verbosity': 2,
    }
