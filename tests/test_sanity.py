from __future__ import annotations


def test_sanity_import() -> None:
    import aperture
    import numpy as np

    assert isinstance(aperture.__version__, str)
    assert isinstance(aperture.Camera(), aperture.Camera)
    assert np.add(1.0, 2.0) == 3.0


def test_cli_prints_version(capsys) -> None:
    from aperture import __version__
    from aperture.__main__ import main

    assert main([]) == 0
    assert __version__ in capsys.readouterr().out
