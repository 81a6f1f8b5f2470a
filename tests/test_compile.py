

def test_compile():
    # Every public module imports without optional extras
    import gcjshift
    import gcjshift.boundary
    import gcjshift.coordinates
    import gcjshift.distance
    import gcjshift.engine
    import gcjshift.layers
    import gcjshift.transform
    import gcjshift.vectorized

    assert gcjshift.__version__
    for name in gcjshift.__all__:
        assert hasattr(gcjshift, name)
