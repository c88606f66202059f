def test_app_entrypoint_parses():
    # Ensures itemgroups.main can be imported (no top-level side effects).
    mod = __import__("itemgroups.main", fromlist=["main"])
    assert callable(getattr(mod, "main", None)), "main() not found in itemgroups.main"


def test_items_package_reexports():
    # This catches path/package mistakes (missing __init__.py, wrong file paths).
    import importlib

    mod = importlib.import_module("itemgroups.items")
    for name in ("Item", "fetch_grouped_items", "build_grouped_items", "sorted_group_ids"):
        assert hasattr(mod, name), f"{name} not exported from itemgroups.items"
