"""Fixed-point arithmetic helpers.

Values follow 32-bit two's complement rules: 20.12 ("fix12") and 16.16
("fix16") formats, 16-bit angle units where 4096 is a full turn, and
16-bit "binary radians" where 65536 is a full turn.
"""

from __future__ import annotations

import math

__all__ = [
    "short_angle_dist",
    "fix16_mul",
    "fix16_div",
    "fix12_div",
    "fix12_mul",
    "fix12_smul",
    "fix12_lerp",
    "fix12_arcsin",
    "fix12_arccos",
    "fxpt_atan2",
    "vec_mag",
    "gte_lerp",
]

_MASK32 = 0xFFFFFFFF

# Arc-cosine lookup: index 0..1024 maps cos 0..1 to angle 1024..0 (4096 per turn).
_ACOS_DATA = """
1024
1023 1022 1022 1021 1020 1020 1019 1019 1018 1017 1017 1016 1015 1015 1014 1013
 1013 1012 1012 1011 1010 1010 1009 1008 1008 1007 1006 1006 1005 1005 1004 1003
1003 1002 1001 1001 1000 999 999 998 998 997 996 996 995 994 994 993
 992 992 991 991 990 989 989 988 987 987 986 985 985 984 984 983
982 982 981 980 980 979 978 978 977 976 976 975 975 974 973 973
 972 971 971 970 969 969 968 968 967 966 966 965 964 964 963 962
962 961 960 960 959 959 958 957 957 956 955 955 954 953 953 952
 952 951 950 950 949 948 948 947 946 946 945 944 944 943 943 942
941 941 940 939 939 938 937 937 936 935 935 934 934 933 932 932
 931 930 930 929 928 928 927 926 926 925 925 924 923 923 922 921
921 920 919 919 918 917 917 916 916 915 914 914 913 912 912 911
 910 910 909 908 908 907 906 906 905 905 904 903 903 902 901 901
900 899 899 898 897 897 896 895 895 894 893 893 892 892 891 890
 890 889 888 888 887 886 886 885 884 884 883 882 882 881 880 880
879 879 878 877 877 876 875 875 874 873 873 872 871 871 870 869
 869 868 867 867 866 865 865 864 863 863 862 861 861 860 859 859
858 858 857 856 856 855 854 854 853 852 852 851 850 850 849 848
 848 847 846 846 845 844 844 843 842 842 841 840 840 839 838 838
837 836 836 835 834 834 833 832 832 831 830 830 829 828 828 827
 826 826 825 824 824 823 822 822 821 820 820 819 818 818 817 816
816 815 814 814 813 812 812 811 810 810 809 808 808 807 806 806
 805 804 804 803 802 802 801 800 800 799 798 797 797 796 795 795
794 793 793 792 791 791 790 789 789 788 787 787 786 785 785 784
 783 783 782 781 780 780 779 778 778 777 776 776 775 774 774 773
772 772 771 770 769 769 768 767 767 766 765 765 764 763 763 762
 761 760 760 759 758 758 757 756 756 755 754 754 753 752 751 751
750 749 749 748 747 747 746 745 744 744 743 742 742 741 740 740
 739 738 737 737 736 735 735 734 733 733 732 731 730 730 729 728
728 727 726 725 725 724 723 723 722 721 720 720 719 718 718 717
 716 715 715 714 713 713 712 711 710 710 709 708 708 707 706 705
705 704 703 703 702 701 700 700 699 698 697 697 696 695 695 694
 693 692 692 691 690 689 689 688 687 687 686 685 684 684 683 682
681 681 680 679 678 678 677 676 675 675 674 673 672 672 671 670
 670 669 668 667 667 666 665 664 664 663 662 661 661 660 659 658
658 657 656 655 655 654 653 652 652 651 650 649 648 648 647 646
 645 645 644 643 642 642 641 640 639 639 638 637 636 635 635 634
633 632 632 631 630 629 629 628 627 626 625 625 624 623 622 622
 621 620 619 618 618 617 616 615 614 614 613 612 611 611 610 609
608 607 607 606 605 604 603 603 602 601 600 599 599 598 597 596
 595 595 594 593 592 591 591 590 589 588 587 586 586 585 584 583
582 582 581 580 579 578 578 577 576 575 574 573 573 572 571 570
 569 568 568 567 566 565 564 563 563 562 561 560 559 558 558 557
556 555 554 553 552 552 551 550 549 548 547 546 546 545 544 543
 542 541 540 540 539 538 537 536 535 534 534 533 532 531 530 529
528 527 527 526 525 524 523 522 521 520 519 519 518 517 516 515
 514 513 512 511 510 510 509 508 507 506 505 504 503 502 501 500
500 499 498 497 496 495 494 493 492 491 490 489 488 487 487 486
 485 484 483 482 481 480 479 478 477 476 475 474 473 472 471 470
469 468 467 467 466 465 464 463 462 461 460 459 458 457 456 455
 454 453 452 451 450 449 448 447 446 445 444 443 442 441 440 439
438 437 436 435 434 433 431 430 429 428 427 426 425 424 423 422
 421 420 419 418 417 416 415 414 412 411 410 409 408 407 406 405
404 403 402 400 399 398 397 396 395 394 393 392 390 389 388 387
 386 385 384 382 381 380 379 378 377 376 374 373 372 371 370 368
367 366 365 364 362 361 360 359 358 356 355 354 353 351 350 349
 348 346 345 344 343 341 340 339 338 336 335 334 332 331 330 328
327 326 324 323 322 320 319 318 316 315 314 312 311 310 308 307
 305 304 302 301 300 298 297 295 294 292 291 289 288 286 285 283
282 280 279 277 276 274 273 271 270 268 266 265 263 262 260 258
 257 255 253 252 250 248 246 245 243 241 239 238 236 234 232 230
229 227 225 223 221 219 217 215 213 211 209 207 205 203 201 199
 197 195 193 190 188 186 184 181 179 177 174 172 169 167 164 162
159 157 154 151 148 145 143 140 137 134 130 127 124 120 117 113
 110 106 102 98 93 89 84 79 73 67 61 54 45 35 21 0
"""

_ACOS_TABLE = tuple(int(token) for token in _ACOS_DATA.split())

# Coefficients of the octant arctangent approximation (Q15).
_ATAN_C0 = 28103
_ATAN_C1 = 53839


def _wrap(value: int, bits: int) -> int:
    """Reduce ``value`` to a signed integer of ``bits`` width."""
    span = 1 << bits
    value &= span - 1
    return value - span if value >= span >> 1 else value


def _i16(value: int) -> int:
    return _wrap(value, 16)


def _i32(value: int) -> int:
    return _wrap(value, 32)


def _u16(value: int) -> int:
    return value & 0xFFFF


def _cdiv(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


def _cmod(a: int, b: int) -> int:
    """Remainder whose sign follows the dividend."""
    return a - b * _cdiv(a, b)


def _clz(x: int) -> int:
    return 32 - x.bit_length() if x else 32


def short_angle_dist(a0: int, a1: int) -> int:
    """Signed shortest distance from angle ``a0`` to ``a1`` (4096 per turn)."""
    da = _i16(_cmod(_i16(a1) - _i16(a0), 4096))
    return _i16(_cmod(da << 1, 4096) - da)


def fix16_mul(a: int, b: int) -> int:
    """Multiply two 16.16 values, truncating."""
    return _i32((_i32(a) * _i32(b)) >> 16)


def fix12_mul(a: int, b: int) -> int:
    """Multiply two 20.12 values using a 64-bit intermediate."""
    return _i32((_i32(a) * _i32(b)) >> 12)


def fix12_smul(a: int, b: int) -> int:
    """Multiply two 20.12 values with a 32-bit intermediate (wraps on overflow)."""
    return _i32(_i32(a) * _i32(b)) >> 12


def fix12_lerp(a: int, b: int, t: int) -> int:
    """Linear interpolation from ``a`` to ``b`` with a 20.12 factor ``t``."""
    return _i32(_i32(a) + fix12_mul(t, _i32(_i32(b) - _i32(a))))


def _fixed_div(a: int, b: int, frac_bits: int, kick_mask: int) -> int:
    a, b = _i32(a), _i32(b)
    if b == 0:
        raise ZeroDivisionError("fixed-point division by zero")

    bit_pos = frac_bits + 1
    remainder = abs(a) & _MASK32
    divider = abs(b) & _MASK32
    quotient = 0

    # Start from a lower estimate when the divider is large.
    if divider & kick_mask:
        shifted_div = (divider >> bit_pos) + 1
        quotient = remainder // shifted_div
        remainder = (remainder - ((quotient * divider) >> bit_pos)) & _MASK32

    while not divider & 0xF and bit_pos >= 4:
        divider >>= 4
        bit_pos -= 4

    while remainder and bit_pos >= 0:
        shift = min(_clz(remainder), bit_pos)
        remainder = (remainder << shift) & _MASK32
        bit_pos -= shift
        div, remainder = divmod(remainder, divider)
        quotient = (quotient + (div << bit_pos)) & _MASK32
        remainder = (remainder << 1) & _MASK32
        bit_pos -= 1

    result = _i32(quotient >> 1)
    if (a ^ b) & 0x80000000:
        result = _i32(-result)
    return result


def fix16_div(a: int, b: int) -> int:
    """Divide two 16.16 values; raises ZeroDivisionError when ``b`` is 0."""
    return _fixed_div(a, b, 16, 0xFFF00000)


def fix12_div(a: int, b: int) -> int:
    """Divide two 20.12 values; raises ZeroDivisionError when ``b`` is 0."""
    return _fixed_div(a, b, 12, 0xFFFF0000)


def _acos_entry(index: int) -> int:
    if not 0 <= index < len(_ACOS_TABLE):
        raise ValueError(f"argument outside the lookup table (index {index})")
    return _ACOS_TABLE[index]


def fix12_arcsin(s: int) -> int:
    """Table arcsine of a 20.12 value, as an angle with 4096 per turn."""
    fsin = (1024 - s) >> 2
    if fsin < 0:
        return 2048 - _acos_entry(fsin + 1024)
    return _acos_entry(fsin)


def fix12_arccos(c: int) -> int:
    """Table arccosine of a 20.12 value, as an angle with 4096 per turn."""
    fcos = c >> 2
    if fcos < 0:
        return 2048 - _acos_entry(fcos + 1024)
    return _acos_entry(fcos)


def _nabs16(j: int) -> int:
    return j if j < 0 else _i16(-j)


def _q15_mul(j: int, k: int) -> int:
    j, k = _i16(j), _i16(k)
    intermediate = j * k
    bias = 0 if (intermediate & 0x7FFF) == 0x4000 else 0x4000
    return _i16((intermediate + bias) >> 15)


def _q15_div(numer: int, denom: int) -> int:
    return _i16(_cdiv(_i16(numer) << 15, _i16(denom)))


def fxpt_atan2(y: int, x: int) -> int:
    """Four-quadrant arctangent of 16-bit inputs.

    The result is in 1/65536ths of a turn: 0x0000 along +x, 0x4000 along +y,
    0x8000 along -x and 0xC000 along -y.
    """
    y, x = _i16(y), _i16(x)
    if x == y:
        if y > 0:
            return 8192
        if y < 0:
            return 40960
        return 0

    if _nabs16(x) < _nabs16(y):
        ratio = _q15_div(y, x)
        correction = _q15_mul(_ATAN_C0, _nabs16(ratio))
        unrotated = _q15_mul(_ATAN_C1 + correction, ratio)
        return _u16(unrotated if x > 0 else 32768 + unrotated)

    ratio = _q15_div(x, y)
    correction = _q15_mul(_ATAN_C0, _nabs16(ratio))
    unrotated = _q15_mul(_ATAN_C1 + correction, ratio)
    return _u16((16384 if y > 0 else 49152) - unrotated)


def vec_mag(x: int, y: int) -> int:
    """Integer length of the 2D vector (x, y) using 32-bit squares."""
    squared = _i32(_i32(x) * _i32(x) + _i32(y) * _i32(y))
    if squared < 0:
        raise ValueError("squared magnitude overflows 32 bits")
    return math.isqrt(squared)


def gte_lerp(a: int, b: int, t: int) -> int:
    """Low-precision interpolation from ``a`` to ``b`` by a 4.12 factor ``t``.

    ``a`` and ``t`` are taken as 16-bit values and the difference ``b - a``
    saturates to the 16-bit range, as on the geometry coprocessor.
    """
    start = _i16(a)
    factor = _i16(t)
    base = start << 12
    delta = ((_i32(b) << 12) - base) >> 12
    delta = max(-0x8000, min(0x7FFF, delta))
    return _i32((delta * factor + base) >> 12)