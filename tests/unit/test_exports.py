import docgrep


def test_public_api():
    for name in docgrep.__all__:
        assert hasattr(docgrep, name)
    assert docgrep.__version__
