"""Test that all modules can be imported without circular import errors."""


def test_no_circular_imports():
    """Verify all public modules import cleanly."""
    import eventcenter
    import eventcenter.center
    import eventcenter.exceptions
    import eventcenter.observability
    import eventcenter.predicates
    import eventcenter.protocols
    import eventcenter.serialization
    import eventcenter.subscription
    import eventcenter.testing

    assert eventcenter.__version__


def test_top_level_import_matches_module_import():
    """Verify top-level re-exports resolve to the defining modules' objects."""
    from eventcenter import EventCenter, clone_payload, global_center
    from eventcenter.center import EventCenter as center_cls
    from eventcenter.center import global_center as center_global
    from eventcenter.serialization.json import clone_payload as json_clone

    assert EventCenter is center_cls
    assert global_center is center_global
    assert clone_payload is json_clone


def test_all_exports_resolve():
    """Every name in __all__ exists on the package."""
    import eventcenter

    for name in eventcenter.__all__:
        assert hasattr(eventcenter, name), name
