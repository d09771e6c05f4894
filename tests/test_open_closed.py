import pytest

from lldpatterns.open_closed import (
    BadInvoice,
    Discount,
    PremiumDiscount,
    RegularDiscount,
    VipDiscount,
    bad_open_closed,
    calculate_discount,
    good_open_closed,
)


def test_regular_discount_value():
    assert RegularDiscount().calculate(1000) == pytest.approx(100)


def test_unknown_invoice_type_has_no_discount():
    assert calculate_discount(BadInvoice(amount=1000, type="gold")) == 0


@pytest.mark.parametrize(
    "kind, strategy",
    [("regular", RegularDiscount()), ("premium", PremiumDiscount()), ("vip", VipDiscount())],
)
def test_switch_and_classes_agree(kind, strategy):
    assert calculate_discount(BadInvoice(amount=250, type=kind)) == pytest.approx(
        strategy.calculate(250)
    )


def test_discounts_grow_with_tier():
    amount = 1000.0
    regular = RegularDiscount().calculate(amount)
    premium = PremiumDiscount().calculate(amount)
    vip = VipDiscount().calculate(amount)
    assert 0 < regular < premium < vip < amount


@pytest.mark.parametrize("strategy", [RegularDiscount(), PremiumDiscount(), VipDiscount()])
def test_zero_amount_has_zero_discount(strategy):
    assert strategy.calculate(0) == 0


def test_discount_is_abstract():
    with pytest.raises(TypeError):
        Discount()


def test_bad_open_closed_output(capsys):
    bad_open_closed()
    out = capsys.readouterr().out
    assert out.startswith("\nDiscount: ")
    value = float(out.split()[-1])
    assert value == pytest.approx(calculate_discount(BadInvoice(amount=1000, type="regular")))


def test_good_open_closed_output(capsys):
    good_open_closed()
    lines = capsys.readouterr().out.splitlines()
    labels = [line.rsplit(" ", 1)[0] for line in lines]
    assert labels == ["Regular Discount", "Premium Discount", "Premium Discount"]
    values = [float(line.rsplit(" ", 1)[1]) for line in lines]
    assert values == pytest.approx(
        [
            RegularDiscount().calculate(1000.0),
            PremiumDiscount().calculate(1000.0),
            VipDiscount().calculate(1000.0),
        ]
    )
    assert all("." not in line for line in lines)