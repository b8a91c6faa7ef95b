from layli.random_service import Shuffler, shuffle


def test_service_shuffle_same_seed_same_result():
    first = [1, 2, 3, 4, 5]
    Shuffler(42).shuffle(first)

    second = [1, 2, 3, 4, 5]
    Shuffler(42).shuffle(second)

    assert len(first) == 5
    assert first == second
    assert sorted(first) == [1, 2, 3, 4, 5]


def test_global_shuffle_with_test_seed_is_repeatable(monkeypatch):
    monkeypatch.setenv("LAYLI_TEST_SEED", "1")

    first = [1, 2, 3, 4, 5]
    shuffle(first)
    second = [1, 2, 3, 4, 5]
    shuffle(second)

    assert len(first) == 5
    assert first == second


def test_global_shuffle_with_test_seed_matches_seed_42(monkeypatch):
    monkeypatch.setenv("LAYLI_TEST_SEED", "1")

    via_global = list(range(20))
    shuffle(via_global)
    via_service = list(range(20))
    Shuffler(42).shuffle(via_service)

    assert via_global == via_service


def test_default_service_is_permutation():
    data = [1, 2, 3, 4, 5]
    Shuffler().shuffle(data)

    assert len(data) == 5
    assert sorted(data) == [1, 2, 3, 4, 5]


def test_global_shuffle_without_test_seed(monkeypatch):
    monkeypatch.delenv("LAYLI_TEST_SEED", raising=False)

    data = [1, 2, 3, 4, 5]
    shuffle(data)

    assert sorted(data) == [1, 2, 3, 4, 5]


def test_reseed_restarts_sequence():
    service = Shuffler(7)
    first = list(range(10))
    service.shuffle(first)

    service.reseed(7)
    second = list(range(10))
    service.shuffle(second)

    assert first == second