"""
ELF Symbolic Name Tables
=========================

Lookup tables mapping the numeric OS/ABI and machine codes found in an
ELF32 header to their symbolic (``ELFOSABI_*`` / ``EM_*``) names and to
the human-readable strings printed by GNU ``readelf``.

The decoder never consults these tables: an unknown OS/ABI or machine
code is a valid header.  Lookups happen at display time and return
``None`` for codes outside the tables.

References:
    - System V Application Binary Interface, Edition 4.1, Figure 4-7.
    - GNU binutils ``readelf.c`` (get_osabi_name, get_machine_name).
    - Linux man page: elf(5).
"""

from __future__ import annotations

from typing import Optional


# ---------------------------------------------------------------------------
# OS/ABI identification (e_ident[EI_OSABI])
# ---------------------------------------------------------------------------

ELFOSABI_SYSV: int = 0x00
ELFOSABI_HPUX: int = 0x01
ELFOSABI_NETBSD: int = 0x02
ELFOSABI_LINUX: int = 0x03
ELFOSABI_HURD: int = 0x04
ELFOSABI_SOLARIS: int = 0x06
ELFOSABI_AIX: int = 0x07
ELFOSABI_IRIX: int = 0x08
ELFOSABI_FREEBSD: int = 0x09
ELFOSABI_TRU64: int = 0x0A
ELFOSABI_MODESTO: int = 0x0B
ELFOSABI_OPENBSD: int = 0x0C
ELFOSABI_OPENVMS: int = 0x0D
ELFOSABI_NSK: int = 0x0E
ELFOSABI_AROS: int = 0x0F
ELFOSABI_FENIXOS: int = 0x10
ELFOSABI_CLOUDABI: int = 0x11
ELFOSABI_OPENVOS: int = 0x12
ELFOSABI_ARM_AEABI: int = 0x40
ELFOSABI_ARM: int = 0x61
ELFOSABI_STANDALONE: int = 0xFF

OSABI_NAMES: dict[int, str] = {
    ELFOSABI_SYSV: "ELFOSABI_SYSV",
    ELFOSABI_HPUX: "ELFOSABI_HPUX",
    ELFOSABI_NETBSD: "ELFOSABI_NETBSD",
    ELFOSABI_LINUX: "ELFOSABI_LINUX",
    ELFOSABI_HURD: "ELFOSABI_HURD",
    ELFOSABI_SOLARIS: "ELFOSABI_SOLARIS",
    ELFOSABI_AIX: "ELFOSABI_AIX",
    ELFOSABI_IRIX: "ELFOSABI_IRIX",
    ELFOSABI_FREEBSD: "ELFOSABI_FREEBSD",
    ELFOSABI_TRU64: "ELFOSABI_TRU64",
    ELFOSABI_MODESTO: "ELFOSABI_MODESTO",
    ELFOSABI_OPENBSD: "ELFOSABI_OPENBSD",
    ELFOSABI_OPENVMS: "ELFOSABI_OPENVMS",
    ELFOSABI_NSK: "ELFOSABI_NSK",
    ELFOSABI_AROS: "ELFOSABI_AROS",
    ELFOSABI_FENIXOS: "ELFOSABI_FENIXOS",
    ELFOSABI_CLOUDABI: "ELFOSABI_CLOUDABI",
    ELFOSABI_OPENVOS: "ELFOSABI_OPENVOS",
    ELFOSABI_ARM_AEABI: "ELFOSABI_ARM_AEABI",
    ELFOSABI_ARM: "ELFOSABI_ARM",
    ELFOSABI_STANDALONE: "ELFOSABI_STANDALONE",
}

OSABI_DISPLAY_NAMES: dict[int, str] = {
    ELFOSABI_SYSV: "UNIX - System V",
    ELFOSABI_HPUX: "UNIX - HP-UX",
    ELFOSABI_NETBSD: "UNIX - NetBSD",
    ELFOSABI_LINUX: "UNIX - GNU",
    ELFOSABI_HURD: "GNU/Hurd",
    ELFOSABI_SOLARIS: "UNIX - Solaris",
    ELFOSABI_AIX: "UNIX - AIX",
    ELFOSABI_IRIX: "UNIX - IRIX",
    ELFOSABI_FREEBSD: "UNIX - FreeBSD",
    ELFOSABI_TRU64: "UNIX - TRU64",
    ELFOSABI_MODESTO: "Novell - Modesto",
    ELFOSABI_OPENBSD: "UNIX - OpenBSD",
    ELFOSABI_OPENVMS: "VMS - OpenVMS",
    ELFOSABI_NSK: "HP - Non-Stop Kernel",
    ELFOSABI_AROS: "AROS",
    ELFOSABI_FENIXOS: "FenixOS",
    ELFOSABI_CLOUDABI: "Nuxi CloudABI",
    ELFOSABI_OPENVOS: "Stratus Technologies OpenVOS",
    ELFOSABI_ARM_AEABI: "ARM EABI",
    ELFOSABI_ARM: "ARM",
    ELFOSABI_STANDALONE: "Standalone App",
}


# ---------------------------------------------------------------------------
# Machine architectures (e_machine)
# ---------------------------------------------------------------------------

EM_NONE: int = 0
EM_M32: int = 1
EM_SPARC: int = 2
EM_386: int = 3
EM_68K: int = 4
EM_88K: int = 5
EM_IAMCU: int = 6
EM_860: int = 7
EM_MIPS: int = 8
EM_PARISC: int = 15
EM_SPARC32PLUS: int = 18
EM_PPC: int = 20
EM_PPC64: int = 21
EM_S390: int = 22
EM_ARM: int = 40
EM_SH: int = 42
EM_SPARCV9: int = 43
EM_IA_64: int = 50
EM_X86_64: int = 62
EM_AVR: int = 83
EM_XTENSA: int = 94
EM_MSP430: int = 105
EM_AARCH64: int = 183
EM_RISCV: int = 243
EM_BPF: int = 247
EM_LOONGARCH: int = 258

MACHINE_NAMES: dict[int, str] = {
    EM_NONE: "EM_NONE",
    EM_M32: "EM_M32",
    EM_SPARC: "EM_SPARC",
    EM_386: "EM_386",
    EM_68K: "EM_68K",
    EM_88K: "EM_88K",
    EM_IAMCU: "EM_IAMCU",
    EM_860: "EM_860",
    EM_MIPS: "EM_MIPS",
    EM_PARISC: "EM_PARISC",
    EM_SPARC32PLUS: "EM_SPARC32PLUS",
    EM_PPC: "EM_PPC",
    EM_PPC64: "EM_PPC64",
    EM_S390: "EM_S390",
    EM_ARM: "EM_ARM",
    EM_SH: "EM_SH",
    EM_SPARCV9: "EM_SPARCV9",
    EM_IA_64: "EM_IA_64",
    EM_X86_64: "EM_X86_64",
    EM_AVR: "EM_AVR",
    EM_XTENSA: "EM_XTENSA",
    EM_MSP430: "EM_MSP430",
    EM_AARCH64: "EM_AARCH64",
    EM_RISCV: "EM_RISCV",
    EM_BPF: "EM_BPF",
    EM_LOONGARCH: "EM_LOONGARCH",
}

MACHINE_DISPLAY_NAMES: dict[int, str] = {
    EM_NONE: "None",
    EM_M32: "WE32100",
    EM_SPARC: "Sparc",
    EM_386: "Intel 80386",
    EM_68K: "MC68000",
    EM_88K: "MC88000",
    EM_IAMCU: "Intel MCU",
    EM_860: "Intel 80860",
    EM_MIPS: "MIPS R3000",
    EM_PARISC: "HPPA",
    EM_SPARC32PLUS: "Sparc v8+",
    EM_PPC: "PowerPC",
    EM_PPC64: "PowerPC64",
    EM_S390: "IBM S/390",
    EM_ARM: "ARM",
    EM_SH: "Renesas / SuperH SH",
    EM_SPARCV9: "Sparc v9",
    EM_IA_64: "Intel IA-64",
    EM_X86_64: "Advanced Micro Devices X86-64",
    EM_AVR: "Atmel AVR 8-bit microcontroller",
    EM_XTENSA: "Tensilica Xtensa Processor",
    EM_MSP430: "Texas Instruments msp430 microcontroller",
    EM_AARCH64: "AArch64",
    EM_RISCV: "RISC-V",
    EM_BPF: "Linux BPF",
    EM_LOONGARCH: "LoongArch",
}


# ---------------------------------------------------------------------------
# Lookup helpers
# ---------------------------------------------------------------------------

def osabi_name(code: int) -> Optional[str]:
    """Return the ``ELFOSABI_*`` name for *code*, or ``None``."""
    return OSABI_NAMES.get(code)


def osabi_display_name(code: int) -> Optional[str]:
    """Return the readelf-style OS/ABI description for *code*, or ``None``."""
    return OSABI_DISPLAY_NAMES.get(code)


def machine_name(code: int) -> Optional[str]:
    """Return the ``EM_*`` name for *code*, or ``None``."""
    return MACHINE_NAMES.get(code)


def machine_display_name(code: int) -> Optional[str]:
    """Return the readelf-style machine description for *code*, or ``None``."""
    return MACHINE_DISPLAY_NAMES.get(code)
