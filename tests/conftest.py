def pytest_configure(config):
    config.addinivalue_line("markers", "slow: deep degenerate-tree tests (deselect with -m 'not slow')")
