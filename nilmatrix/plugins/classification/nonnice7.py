# -*- coding: utf-8 -*-
"""
classification/nonnice7.py - The 7-dimensional nilpotent Lie algebras that
have no nice basis (Conti and Rossi, Table 2).
"""

from .base import Classification, entry


class NonniceNilpotentLieAlgebras7(Classification):
    ENTRIES = (
        # reducible
        entry("0,0,12,13,0,14+23+25,0"),

        entry("0,0,12,13,14,15+23,16+23+24"),
        entry("0,0,12,13,14,15+23,16+24+25-34"),
        entry("0,0,12,13,14+23,15+24,16+23+25"),
        entry("0,0,12,13,14+23,15+24,-16+23-25", name="123457H1"),

        entry("0,0,12,13,14+23,15+24,23"),
        entry("0,0,12,13,14+23,25-34,23"),
        entry("0,0,12,13,14,23,16+25+24-34"),
        entry("0,0,12,13,14,23,15+25+26-34"),
        entry("0,0,12,13,23,15+24,14+16+25+34"),
        entry("0,0,12,13,23,15+24,14+16-25+34"),
        entry("0,0,12,13,23,15+24,14+16+34"),
        entry("0,0,12,13,23,15+24,14+16+[lambda]*25+26+34-35", "lambda"),

        entry("0,0,12,13,23,-14-25,16+25-35"),
        entry("0,0,12,13,23,-14-25,15+16+24+[lambda]*25-35", "lambda"),
        entry("0,0,12,13,14,0,15+23+26"),
        entry("0,0,12,13,14+23,0,15+24+26"),
        entry("0,0,12,13,0,14+25,25+35+16"),
        entry("0,0,12,13,0,14+23+25,16+24+35"),
        entry("0,0,12,13,0,14+23+25,26-34"),
        entry("0,0,12,13,0,14+23+25,15+26-34"),
        entry("0,0,0,12,14+23,15-34,16+23-35"),
        entry("0,0,12,13,0,25+23,14"),
        entry("0,0,12,13,0,14+23,23+25"),
        entry("0,0,12,0,13,23+24,15+16+25+[lambda]*26+34", "lambda"),
        entry("0,0,12,13,0,14+23+25,0"),
        entry("0,0,12,13,0,14+25+23,15"),
        entry("0,0,0,12,14+23,23,15-34"),
        entry("0,0,12,0,23,14,16+26+25-34"),
        entry("0,0,12,0,24+13,14,15+23+1/2*26+1/2*34"),
        entry("0,0,12,0,24+13,14,15+[lambda]*23+34+46", "lambda"),
        entry("0,0,0,12,13,14+24-35,25+34"),
        entry("0,0,0,12,13,15+35,25+34"),
        entry("0,0,0,12,23,-13,15+16+26-2*34"),
        entry("0,0,0,12,23,-13,[-lambda]*16+[lambda]*25+2*26-2*34", "lambda"),
        entry("0,0,0,12,14+23,0,15-34+36"),
        entry("0,0,0,12,14+23,0,15-34+24+36"),
        entry("0,0,12,0,0,13+14,15+23"),
        entry("0,0,12,0,0,13+14+25,15+23"),
    )


__all__ = ['NonniceNilpotentLieAlgebras7']
