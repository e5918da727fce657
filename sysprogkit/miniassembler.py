"""Encoders for a handful of ARMv8 (AArch64) instructions."""

from __future__ import annotations

_WORD_MASK = 0xFFFFFFFF
_ADDR_LIMIT = 1 << 64

MOV_BASE = 0x52800000
ADR_BASE = 0x10000000
STRB_BASE = 0x39000000
B_BASE = 0x14000000


def _set_field(src: int, src_start: int, dest: int, dest_start: int, num_bits: int) -> int:
    """Return dest with num_bits of src (from src_start) ORed in at dest_start."""
    mask = (1 << num_bits) - 1
    return (dest | (((src >> src_start) & mask) << dest_start)) & _WORD_MASK


def _check_reg(reg: int, name: str = "register") -> None:
    if not 0 <= reg <= 31:
        raise ValueError(f"{name} must be between 0 and 31, got {reg}")


def _check_addr(addr: int, name: str, aligned: bool) -> None:
    if not 0 <= addr < _ADDR_LIMIT:
        raise ValueError(f"{name} must be an unsigned 64-bit address")
    if aligned and addr % 4:
        raise ValueError(f"{name} must be a multiple of 4")


def mov(reg: int, immed: int) -> int:
    """Encode "mov wREG, #IMMED" with -32768 <= immed <= 32767."""
    _check_reg(reg)
    if not -32768 <= immed <= 32767:
        raise ValueError(f"immediate must be between -32768 and 32767, got {immed}")
    instr = _set_field(reg, 0, MOV_BASE, 0, 5)
    return _set_field(immed & _WORD_MASK, 0, instr, 5, 16)


def adr(reg: int, addr: int, instr_addr: int) -> int:
    """Encode "adr xREG, ADDR" for an instruction located at instr_addr."""
    _check_reg(reg)
    _check_addr(addr, "addr", aligned=False)
    _check_addr(instr_addr, "instr_addr", aligned=True)
    instr = _set_field(reg, 0, ADR_BASE, 0, 5)
    disp = (addr - instr_addr) & _WORD_MASK
    instr = _set_field(disp, 0, instr, 29, 2)
    return _set_field(disp, 2, instr, 5, 19)


def strb(from_reg: int, to_reg: int) -> int:
    """Encode "strb wFROM, [xTO]"."""
    _check_reg(from_reg, "from_reg")
    _check_reg(to_reg, "to_reg")
    instr = _set_field(from_reg, 0, STRB_BASE, 0, 5)
    return _set_field(to_reg, 0, instr, 5, 5)


def b(addr: int, instr_addr: int) -> int:
    """Encode "b ADDR" for a branch instruction located at instr_addr."""
    _check_addr(addr, "addr", aligned=True)
    _check_addr(instr_addr, "instr_addr", aligned=True)
    disp = (addr - instr_addr) & _WORD_MASK
    return _set_field(disp, 2, B_BASE, 0, 26)