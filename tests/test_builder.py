import pytest

from lldpatterns.builder import (
    BadComputer,
    Computer,
    ComputerBuilder,
    GamingBuilder,
    bad_builder,
    good_builder,
)


def test_builder_chain_sets_all_parts():
    pc = (
        GamingBuilder()
        .set_cpu("cpu-a")
        .set_gpu("gpu-b")
        .set_ram("ram-c")
        .set_ssd("ssd-d")
        .build()
    )
    assert pc == Computer(cpu="cpu-a", gpu="gpu-b", ram="ram-c", ssd="ssd-d")


def test_each_step_returns_the_builder():
    builder = GamingBuilder()
    assert builder.set_cpu("x") is builder
    assert builder.set_gpu("x") is builder
    assert builder.set_ram("x") is builder
    assert builder.set_ssd("x") is builder


def test_unset_parts_stay_empty():
    pc = GamingBuilder().set_cpu("only-cpu").build()
    assert pc == Computer(cpu="only-cpu")
    assert pc.gpu == ""


def test_build_returns_the_same_computer():
    builder = GamingBuilder()
    first = builder.build()
    builder.set_ram("more")
    assert builder.build() is first
    assert first.ram == "more"


def test_computer_builder_is_abstract():
    with pytest.raises(TypeError):
        ComputerBuilder()


def test_bad_computer_positional_order():
    pc = BadComputer("c", "g", "r", "s")
    assert (pc.cpu, pc.gpu, pc.ram, pc.ssd) == ("c", "g", "r", "s")


def test_specs_output(capsys):
    Computer(cpu="c", gpu="g", ram="r", ssd="s").specs()
    assert capsys.readouterr().out == (
        "Computer Specs:\nCPU: c\nGPU: g\nRAM: r\nSSD: s\n"
    )


def test_good_builder_output(capsys):
    good_builder()
    assert capsys.readouterr().out == (
        "Computer Specs:\nCPU: Intel i9\nGPU: RTX 4090\nRAM: 64GB\nSSD: 2TB\n"
    )


def test_bad_builder_output(capsys):
    bad_builder()
    assert capsys.readouterr().out == (
        "Bad Computer Specs:\nCPU: Intel i5\nGPU: \nRAM: 8GB\nSSD: 512GB\n"
    )