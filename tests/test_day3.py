from advent24.day3 import enabled_mul_sum, mul_sum

EXAMPLE = "xmul(2,4)%&mul[3,7]!@^do_not_mul(5,5)+mul(32,64]then(mul(11,8)mul(8,5))"
EXAMPLE_ENABLED = "xmul(2,4)&mul[3,7]!^don't()_mul(5,5)+mul(32,64](mul(11,8)undo()?mul(8,5))"


def test_mul_sum_example():
    assert mul_sum(EXAMPLE) == 161


def test_enabled_mul_sum_example():
    assert enabled_mul_sum(EXAMPLE_ENABLED) == 48


def test_noise_is_ignored():
    noise = "mul(4*mul(6,9!?(12,34)mul ( 2 , 4 )"
    assert mul_sum(noise + "mul(3,7)") == mul_sum("mul(3,7)")


def test_three_arguments_are_ignored():
    assert mul_sum("mul(1,2,3)mul(2,5)") == mul_sum("mul(2,5)")


def test_sum_is_additive_over_concatenation():
    assert mul_sum("mul(2,4)mul(5,5)") == mul_sum("mul(2,4)") + mul_sum("mul(5,5)")


def test_without_conditionals_both_sums_agree():
    assert enabled_mul_sum(EXAMPLE) == mul_sum(EXAMPLE)


def test_dont_at_start_disables_everything():
    assert enabled_mul_sum("don't()mul(2,3)mul(4,5)") == 0


def test_do_reenables():
    assert enabled_mul_sum("don't()mul(2,3)do()mul(4,5)") == mul_sum("mul(4,5)")


def test_mul_sum_works_line_by_line():
    assert mul_sum("mul(2,\n3)") == mul_sum("")


def test_enabled_sum_joins_lines():
    assert enabled_mul_sum("mul(2,\n3)") == mul_sum("mul(2,3)")


def test_negative_factors_are_accepted():
    assert mul_sum("mul(-2,3)") == -mul_sum("mul(2,3)")