from plonkcore import field, hades


def test_constants_count():
    assert len(hades.constants()) == hades.CONSTANTS == 960


def test_constants_are_reduced_and_distinct():
    values = hades.constants()
    assert all(0 <= v < field.MODULUS for v in values)
    assert len(set(values)) == len(values)


def test_constants_are_deterministic_copies():
    first = list(hades.constants())
    original_head = first[0]
    first[0] = 0
    second = hades.constants()
    assert second[0] == original_head
    assert second[0] != 0
    assert list(second[1:]) == first[1:]


def test_mds_shape():
    matrix = hades.mds()
    assert len(matrix) == hades.WIDTH
    assert all(len(row) == hades.WIDTH for row in matrix)


def test_mds_entries_are_cauchy_inverses():
    matrix = hades.mds()
    for i, row in enumerate(matrix):
        for j, value in enumerate(row):
            assert value * (i + j + hades.WIDTH) % field.MODULUS == 1


def test_mds_is_symmetric():
    matrix = hades.mds()
    for i in range(hades.WIDTH):
        for j in range(hades.WIDTH):
            assert matrix[i][j] == matrix[j][i]


def test_mds_first_entry_inverts_width():
    assert hades.mds()[0][0] == field.invert(5)