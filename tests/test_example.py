from racesim.example import do_something


def test_do_something_returns_argument():
    assert do_something(10) == 10