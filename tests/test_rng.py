from faemaze.rng import make_random, pick, shuffle

def test_shuffle_is_permutation_and_seeded():
    a = list(range(50))
    b = list(range(50))
    shuffle(a, make_random(7))
    shuffle(b, make_random(7))
    assert a == b
    assert sorted(a) == list(range(50))
    assert a != list(range(50))

def test_shuffle_short_lists_draw_nothing():
    class NoDraws:
        def randrange(self, n):
            raise AssertionError("should not draw")
    one = [3]
    shuffle(one, NoDraws())
    shuffle([], NoDraws())
    assert one == [3]

def test_shuffle_fisher_yates_order():
    # randrange(i+1) always returning 0 rotates the first element to the back
    class Zero:
        def randrange(self, n):
            return 0
    items = [1, 2, 3, 4]
    shuffle(items, Zero())
    assert items == [2, 3, 4, 1]

def test_pick_uses_randrange():
    class Fixed:
        def randrange(self, n):
            return n - 1
    assert pick(Fixed(), ["a", "b", "c"]) == "c"
