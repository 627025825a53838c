# -*- coding: utf-8 -*-
"""
classification/gong7.py - Gong's list of 7-dimensional nilpotent Lie algebras.

Real nilpotent Lie algebras of dimension 7, reducible ones included, grouped
by step. The one-parameter families come last.
"""

from .base import Classification, entry


class NilpotentLieAlgebras7(Classification):
    ENTRIES = (
        # reducible, 3+4
        entry("0, 0, 0, 0, 12, 34, 36"),
        # reducible, 6+1
        entry("0, 0, 12, 13, 23, 14, 0"),
        entry("0, 0, 12, 13, 23, 14 + 25, 0"),
        entry("0, 0, 12, 13,23, 14 - 25, 0"),
        entry("0,0,12,13,14+23,24+15, 0"),
        entry("0, 0, 0, 12, 14, 15 + 23, 0"),
        entry("0, 0, 0, 12, 14 - 23, 15 + 34, 0"),
        entry("0, 0, 0, 12, 14, 15, 0"),
        entry("0, 0, 0, 12, 23, 14 + 35, 0"),
        entry("0, 0, 0, 12, 23, 14 - 35, 0"),
        entry("0, 0, 0, 12, 13, 14 + 35, 0"),
        entry("0, 0, 0, 12, 13, 14 + 23, 0"),
        entry("0, 0, 0, 12, 13, 24, 0"),
        entry("0, 0, 0, 12, 13, 23, 0"),
        entry("0, 0, 0, 12, 14, 15 + 24, 0"),
        entry("0, 0, 0, 12, 14, 15+ 23+ 24, 0"),
        entry("0, 0, 0, 0, 12, 14 + 25, 0"),
        entry("0, 0, 0, 0, 12, 15 + 34, 0"),
        entry("0, 0, 0, 0, 13 + 42, 14 + 23, 0"),
        entry("0, 0, 0, 0, 12, 14 + 23, 0"),
        entry("0, 0, 0, 0, 12, 13, 0"),
        entry("0, 0, 0, 0, 12, 34, 0"),
        entry("0, 0, 0, 0, 0, 12 + 34, 0"),
        entry("0, 0, 0, 0, 0, 12, 0"),

        entry("0,0,12,13,14+23,34+52, 0"),
        entry("0, 0, 12, 13, 14, 34 + 52, 0"),

        entry("0, 0, 12, 13, 14, 15,0"),
        entry("0,0,12,13,14,23+15,0"),
        entry("0,0,0,12,14,24,0"),
        entry("0,0,0,12,13+42,14+23,0"),
        entry("0,0,0,12,14,13+42,0"),
        entry("0,0,0,12,13+14,24,0"),
        entry("0,0,0,12,13,14,0"),
        entry("0,0,0,0,12,15,0"),

        # irreducible, step 2
        entry("0,0,0,0,12,23,24"),
        entry("0,0,0,0,12,23,34"),
        entry("0,0,0,0,12+34,23,24"),
        entry("0,0,0,0,12+34,13,24"),
        entry("0,0,0,0,0,12,14+35"),
        entry("0,0,0,0,0,12+34,15+23"),
        entry("0,0,0,0,0,0,12+34+56"),
        entry("0,0,0,0,12-34,13+24,14"),
        entry("0,0,0,0,12-34,13+24,14-23"),

        # irreducible, step 3
        entry("0,0,12,0,13,24,14"),
        entry("0,0,12,0,13,23,14"),
        entry("0,0,12,0,13+24,23,14"),
        entry("0,0,12,0,0,13+24,15"),
        entry("0,0,12,0,0,13,14+25"),
        entry("0,0,12,0,0,13+24,25"),
        entry("0,0,12,0,0,13+24,14+25"),
        entry("0,0,12,0,0,13+45,24"),
        entry("0,0,12,0,0,13+45,15+24"),
        entry("0,0,12,0,0,13+24,45"),
        entry("0,0,12,0,0,13+14,15+23"),
        entry("0,0,12,0,0,13+24,15+23"),
        entry("0,0,12,0,0,13,23+45"),
        entry("0,0,12,0,0,13+24,23+45"),
        entry("0,0,0,12,13,14,15"),
        entry("0,0,0,12,13,14,35"),
        entry("0,0,0,12,13,14+35,15"),
        entry("0,0,0,12,13,14,25+34"),
        entry("0,0,0,12,13,14+15,25+34"),
        entry("0,0,0,12,13,24+35,25+34"),
        entry("0,0,0,12,13,14+15+24+35,25+34"),
        entry("0,0,0,12,13,14+24+35,25+34"),
        entry("0,0,0,12,13,25+34,35"),
        entry("0,0,0,12,13,15+35,25+34"),
        entry("0,0,0,12,13,14+35,25+34"),
        entry("0,0,0,12,13,14+23,15"),
        entry("0,0,0,12,13,14+23,35"),
        entry("0,0,0,12,13,15+24,23"),
        entry("0,0,0,12,13,14+35,15+23"),
        entry("0,0,0,12,13,23,25+34"),
        entry("0,0,0,12,13,14+23,25+34"),
        entry("0,0,0,12,13,14+15+23,25+34"),
        entry("0,0,12,0,0,0,13+24+56"),

        entry("0,0,0,12,13,0,16+25+34"),
        entry("0,0,0,12,13,0,14+26+35"),
        entry("0,0,0,12,23,-13,15+26+16-2*34"),
        entry("0,0,0,0,12,34,15+36"),
        entry("0,0,0,0,12,34,15+24+36"),
        entry("0,0,0,0,12,14+23,16-35"),
        entry("0,0,0,0,12,14+23,16+24-35"),
        entry("0,0,12,0,0,13+14+25,15+23"),
        entry("0,0,0,12,13,14,24+35"),
        entry("0,0,0,12,13,24-35,25+34"),
        entry("0,0,0,12,13,14+24-35,25+34"),
        entry("0,0,0,12,13,23,24+35"),
        entry("0,0,0,12,13,14+23,24+35"),
        entry("0,0,0,12,13,0,16+24+35"),
        entry("0,0,0,0,13+24,14-23,15+26", name="137A1"),
        entry("0,0,0,0,13+24,14-23,15+26+24", name="137B1"),

        # step 4
        entry("0,0,12,13,0,14,15"),
        entry("0,0,12,13,0,25,14"),
        entry("0,0,12,13,0,14+25,15"),
        entry("0,0,12,13,0,14+23+25,15"),
        entry("0,0,12,13,0,23+25,14"),
        entry("0,0,12,13,0,14+23,15"),
        entry("0,0,12,13,0,15+23,14"),
        entry("0,0,12,13,0,23,14+25"),
        entry("0,0,12,13,0,14+23,25"),
        entry("0,0,12,13,0,14+23,23+25"),

        entry("0,0,12,13,0,15+23,14+25"),
        entry("0,0,12,13,23,14+25,15+24"),
        entry("0,0,12,13,23,24+15,14"),
        entry("0,0,0,12,14+23,13,15-34"),
        entry("0,0,0,12,14+23,24,15-34"),
        entry("0,0,0,12,14+23,13+24,15-34"),
        entry("0,0,12,13,0,0,14+56"),
        entry("0,0,12,13,0,0,23+14+56"),
        entry("0,0,0,12,14+23,0,15+26-34"),
        entry("0,0,0,12,14+23,0,15+36-34"),
        entry("0,0,0,12,14+23,0,15+24+36-34"),
        entry("0,0,12,0,23,24,16+25+34"),
        entry("0,0,12,0,23,24,25+46"),
        entry("0,0,12,0,23,24,13+25-46"),
        entry("0,0,12,0,23,14,16+25"),
        entry("0,0,12,0,23,14,16+25+26-34"),
        entry("0,0,12,0,23,14,25+46"),
        entry("0,0,12,0,23,14,13+25+46"),
        entry("0,0,12,0,13+24,14,15+23+1/2*(26+34)"),
        entry("0,0,12,0,13+24,23,16+25"),

        entry("0,0,12,0,13+24,23,15+26+34"),
        entry("0,0,12,0,13,23+24,15+26"),
        entry("0,0,12,0,13,23+24,16+25+34"),
        entry("0,0,12,13,23,14-25,15+24"),
        entry("0,0,0,12,14+23,13-24,15-34"),
        entry("0,0,12,0,23,24,13+25+46", name="137F1"),
        entry("0,0,12,0,13+24,23,15+34-26", name="137P1"),
        entry("0,0,12,0,13,23+24,15-26", name="1357Q1"),

        # step 5
        entry("0,0,12,13,14,15,23"),
        entry("0,0,12,13,14,25-34,23"),
        entry("0,0,12,13,14,15,25-34"),
        entry("0,0,12,13,14,15+23,25-34"),
        entry("0,0,12,13,14+23,15+24,23"),
        entry("0,0,12,13,14+23,25-34,23"),
        entry("0,0,12,13,14+23,15+24,25-34"),
        entry("0,0,12,13,14,0,15+26"),
        entry("0,0,12,13,14,0,15+23+26"),
        entry("0,0,12,13,14,0,16+25-34"),
        entry("0,0,12,13,14+23,0,15+24+26"),
        entry("0,0,12,13,14+23,0,16+25-34"),
        entry("0,0,12,13,14,23,15+26"),
        entry("0,0,12,13,14,23,16+24+25-34"),
        entry("0,0,12,13,14,23,15+25+26-34"),
        entry("0,0,12,13,0,14+25,16+35"),

        entry("0,0,12,13,0,14+25,16+25+35"),
        entry("0,0,12,13,0,14+25,26-34"),
        entry("0,0,12,13,0,14+25,15+26-34"),
        entry("0,0,12,13,0,14+23+25,16+24+35"),
        entry("0,0,12,13,0,14+23+25,26-34"),
        entry("0,0,12,13,0,14+23+25,15+26-34"),
        entry("0,0,12,13,23,15+24,16+34"),
        entry("0,0,12,13,23,15+24,16+25+34"),
        entry("0,0,12,13,23,15+24,16+14+25+34"),
        entry("0,0,12,13,23,15+24,16+14+34"),
        entry("0,0,12,13,23,15+24,16+26+34-35"),
        entry("0,0,0,12,14+23,15-34,16-35"),
        entry("0,0,0,12,14+23,15-34,16+23-35"),
        entry("0,0,0,12,14+23,15-34,16+24-35"),
        entry("0,0,12,13,23,24+15,16+14-25+34", name="12457J1"),
        entry("0,0,12,13,23,-14-25,16-35", name="12457L1"),
        entry("0,0,12,13,23,-14-25,16-35+25", name="12457N1"),
        entry("0,0,0,12,14+23,15-34,16-23-35", name="12357B1"),

        entry("0,0,12,0,0,23+45,24"),

        # step 6
        entry("0,0,12,13,14,15,16"),
        entry("0,0,12,13,14,15,16+23"),
        entry("0,0,12,13,14,15,16+25-34"),
        entry("0,0,12,13,14,15+23,16+24"),
        entry("0,0,12,13,14,15+23,16+23+24"),
        entry("0,0,12,13,14,15+23,16+24+25-34"),
        entry("0,0,12,13,14+23,15+24,16+23+25"),

        entry("0,0,12,13,14+23,15+24,-16+23-25", name="123457H1"),

        # one-parameter families, lambda real
        entry("0,0,0,12,23,-13,[lambda]*26-15-[lambda-1]*34", "lambda"),
        entry("0,0,12,0,24+13,14,[1-lambda]*34 +15+[lambda]*26", "lambda"),
        entry("0,0,12,0,13+24,14,46+34+15+[lambda]*23", "lambda"),
        entry("0,0,12,0,13,24+23,25+34+16+15+[lambda]*26", "lambda"),
        entry("0,0,12,13,23,24+15,[lambda]*25+26+34-35+16+14", "lambda"),
        entry("0,0,12,13,14+23,24+15,[lambda]*25-[lambda-1]*34+16", "lambda"),
        entry("0,0,0,12,23,-13,2*26-2*34-[lambda]*16+[lambda]*25", "lambda"),
        entry("0,0,12,0,13+24,14-23,[lambda]*26+15-[lambda-1]*34", "lambda"),
        entry("0,0,12,13,23,-14-25,15-35+16+24+[lambda]*25", "lambda"),
    )


__all__ = ['NilpotentLieAlgebras7']
