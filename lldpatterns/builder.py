"""Computers built from a long positional constructor, and by a step-wise builder."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass
class BadComputer:
    """A computer whose parts must be passed in a fixed positional order."""

    cpu: str
    gpu: str
    ram: str
    ssd: str


def bad_builder() -> None:
    """Build a computer from positional arguments and print its parts."""
    pc = BadComputer("Intel i5", "", "8GB", "512GB")
    print("Bad Computer Specs:")
    print("CPU:", pc.cpu)
    print("GPU:", pc.gpu)
    print("RAM:", pc.ram)
    print("SSD:", pc.ssd)


@dataclass
class Computer:
    """A computer whose parts are set one by one."""

    cpu: str = ""
    gpu: str = ""
    ram: str = ""
    ssd: str = ""

    def specs(self) -> list[str]:
        """Print the parts of the computer and return the printed lines."""
        lines = [
            "Computer Specs:",
            f"CPU: {self.cpu}",
            f"GPU: {self.gpu}",
            f"RAM: {self.ram}",
            f"SSD: {self.ssd}",
        ]
        for line in lines:
            print(line)
        return lines


class ComputerBuilder(ABC):
    """Sets the parts of a computer step by step; each step returns the builder."""

    @abstractmethod
    def set_cpu(self, cpu: str) -> ComputerBuilder:
        """Set the processor."""

    @abstractmethod
    def set_gpu(self, gpu: str) -> ComputerBuilder:
        """Set the graphics card."""

    @abstractmethod
    def set_ram(self, ram: str) -> ComputerBuilder:
        """Set the memory."""

    @abstractmethod
    def set_ssd(self, ssd: str) -> ComputerBuilder:
        """Set the storage."""

    @abstractmethod
    def build(self) -> Computer:
        """Return the computer built so far."""


class GamingBuilder(ComputerBuilder):
    """A builder that fills in one computer it owns."""

    def __init__(self) -> None:
        self._computer = Computer()

    def set_cpu(self, cpu: str) -> GamingBuilder:
        self._computer.cpu = cpu
        return self

    def set_gpu(self, gpu: str) -> GamingBuilder:
        self._computer.gpu = gpu
        return self

    def set_ram(self, ram: str) -> GamingBuilder:
        self._computer.ram = ram
        return self

    def set_ssd(self, ssd: str) -> GamingBuilder:
        self._computer.ssd = ssd
        return self

    def build(self) -> Computer:
        return self._computer


def good_builder() -> None:
    """Build a gaming computer by chained steps and print its parts."""
    pc = (
        GamingBuilder()
        .set_cpu("Intel i9")
        .set_gpu("RTX 4090")
        .set_ram("64GB")
        .set_ssd("2TB")
        .build()
    )
    pc.specs()