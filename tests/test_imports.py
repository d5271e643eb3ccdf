"""
Smoke tests to verify all modules can be imported.
"""

def test_import_store():
    import store
    assert hasattr(store, '__version__')


def test_import_ranking():
    import ranking
    assert hasattr(ranking, '__version__')


def test_import_baus():
    import baus
    assert hasattr(baus, '__version__')


def test_import_cli():
    from baus.cli import app
    assert app is not None
