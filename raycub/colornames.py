"""Named colours understood by XPM colour definitions."""

from __future__ import annotations

# Each line holds a hexadecimal RGB value followed by the colour name.
# Order matters: when a name occurs twice, the first entry wins.
_NAMED = """\
fffafa snow
f8f8ff ghost white
f8f8ff ghostwhite
f5f5f5 white smoke
f5f5f5 whitesmoke
dcdcdc gainsboro
fffaf0 floral white
fffaf0 floralwhite
fdf5e6 old lace
fdf5e6 oldlace
faf0e6 linen
faebd7 antique white
faebd7 antiquewhite
ffefd5 papaya whip
ffefd5 papayawhip
ffebcd blanched almond
ffebcd blanchedalmond
ffe4c4 bisque
ffdab9 peach puff
ffdab9 peachpuff
ffdead navajo white
ffdead navajowhite
ffe4b5 moccasin
fff8dc cornsilk
fffff0 ivory
fffacd lemon chiffon
fffacd lemonchiffon
fff5ee seashell
f0fff0 honeydew
f5fffa mint cream
f5fffa mintcream
f0ffff azure
f0f8ff alice blue
f0f8ff aliceblue
e6e6fa lavender
fff0f5 lavender blush
fff0f5 lavenderblush
ffe4e1 misty rose
ffe4e1 mistyrose
ffffff white
000000 black
2f4f4f dark slate
2f4f4f darkslategray
2f4f4f dark slate
2f4f4f darkslategrey
696969 dim gray
696969 dimgray
696969 dim grey
696969 dimgrey
708090 slate gray
708090 slategray
708090 slate grey
708090 slategrey
778899 light slate
778899 lightslategray
778899 light slate
778899 lightslategrey
bebebe gray
bebebe grey
d3d3d3 light grey
d3d3d3 lightgrey
d3d3d3 light gray
d3d3d3 lightgray
191970 midnight blue
191970 midnightblue
000080 navy
000080 navy blue
000080 navyblue
6495ed cornflower blue
6495ed cornflowerblue
483d8b dark slate
483d8b darkslateblue
6a5acd slate blue
6a5acd slateblue
7b68ee medium slate
7b68ee mediumslateblue
8470ff light slate
8470ff lightslateblue
0000cd medium blue
0000cd mediumblue
4169e1 royal blue
4169e1 royalblue
0000ff blue
1e90ff dodger blue
1e90ff dodgerblue
00bfff deep sky
00bfff deepskyblue
87ceeb sky blue
87ceeb skyblue
87cefa light sky
87cefa lightskyblue
4682b4 steel blue
4682b4 steelblue
b0c4de light steel
b0c4de lightsteelblue
add8e6 light blue
add8e6 lightblue
b0e0e6 powder blue
b0e0e6 powderblue
afeeee pale turquoise
afeeee paleturquoise
00ced1 dark turquoise
00ced1 darkturquoise
48d1cc medium turquoise
48d1cc mediumturquoise
40e0d0 turquoise
00ffff cyan
e0ffff light cyan
e0ffff lightcyan
5f9ea0 cadet blue
5f9ea0 cadetblue
66cdaa medium aquamarine
66cdaa mediumaquamarine
7fffd4 aquamarine
006400 dark green
006400 darkgreen
556b2f dark olive
556b2f darkolivegreen
8fbc8f dark sea
8fbc8f darkseagreen
2e8b57 sea green
2e8b57 seagreen
3cb371 medium sea
3cb371 mediumseagreen
20b2aa light sea
20b2aa lightseagreen
98fb98 pale green
98fb98 palegreen
00ff7f spring green
00ff7f springgreen
7cfc00 lawn green
7cfc00 lawngreen
00ff00 green
7fff00 chartreuse
00fa9a medium spring
00fa9a mediumspringgreen
adff2f green yellow
adff2f greenyellow
32cd32 lime green
32cd32 limegreen
9acd32 yellow green
9acd32 yellowgreen
228b22 forest green
228b22 forestgreen
6b8e23 olive drab
6b8e23 olivedrab
bdb76b dark khaki
bdb76b darkkhaki
f0e68c khaki
eee8aa pale goldenrod
eee8aa palegoldenrod
fafad2 light goldenrod
fafad2 lightgoldenrodyellow
ffffe0 light yellow
ffffe0 lightyellow
ffff00 yellow
ffd700 gold
eedd82 light goldenrod
eedd82 lightgoldenrod
daa520 goldenrod
b8860b dark goldenrod
b8860b darkgoldenrod
bc8f8f rosy brown
bc8f8f rosybrown
cd5c5c indian red
cd5c5c indianred
8b4513 saddle brown
8b4513 saddlebrown
a0522d sienna
cd853f peru
deb887 burlywood
f5f5dc beige
f5deb3 wheat
f4a460 sandy brown
f4a460 sandybrown
d2b48c tan
d2691e chocolate
b22222 firebrick
a52a2a brown
e9967a dark salmon
e9967a darksalmon
fa8072 salmon
ffa07a light salmon
ffa07a lightsalmon
ffa500 orange
ff8c00 dark orange
ff8c00 darkorange
ff7f50 coral
f08080 light coral
f08080 lightcoral
ff6347 tomato
ff4500 orange red
ff4500 orangered
ff0000 red
ff69b4 hot pink
ff69b4 hotpink
ff1493 deep pink
ff1493 deeppink
ffc0cb pink
ffb6c1 light pink
ffb6c1 lightpink
db7093 pale violet
db7093 palevioletred
b03060 maroon
c71585 medium violet
c71585 mediumvioletred
d02090 violet red
d02090 violetred
ff00ff magenta
ee82ee violet
dda0dd plum
da70d6 orchid
ba55d3 medium orchid
ba55d3 mediumorchid
9932cc dark orchid
9932cc darkorchid
9400d3 dark violet
9400d3 darkviolet
8a2be2 blue violet
8a2be2 blueviolet
a020f0 purple
9370db medium purple
9370db mediumpurple
d8bfd8 thistle
fffafa snow1
eee9e9 snow2
cdc9c9 snow3
8b8989 snow4
fff5ee seashell1
eee5de seashell2
cdc5bf seashell3
8b8682 seashell4
ffefdb antiquewhite1
eedfcc antiquewhite2
cdc0b0 antiquewhite3
8b8378 antiquewhite4
ffe4c4 bisque1
eed5b7 bisque2
cdb79e bisque3
8b7d6b bisque4
ffdab9 peachpuff1
eecbad peachpuff2
cdaf95 peachpuff3
8b7765 peachpuff4
ffdead navajowhite1
eecfa1 navajowhite2
cdb38b navajowhite3
8b795e navajowhite4
fffacd lemonchiffon1
eee9bf lemonchiffon2
cdc9a5 lemonchiffon3
8b8970 lemonchiffon4
fff8dc cornsilk1
eee8cd cornsilk2
cdc8b1 cornsilk3
8b8878 cornsilk4
fffff0 ivory1
eeeee0 ivory2
cdcdc1 ivory3
8b8b83 ivory4
f0fff0 honeydew1
e0eee0 honeydew2
c1cdc1 honeydew3
838b83 honeydew4
fff0f5 lavenderblush1
eee0e5 lavenderblush2
cdc1c5 lavenderblush3
8b8386 lavenderblush4
ffe4e1 mistyrose1
eed5d2 mistyrose2
cdb7b5 mistyrose3
8b7d7b mistyrose4
f0ffff azure1
e0eeee azure2
c1cdcd azure3
838b8b azure4
836fff slateblue1
7a67ee slateblue2
6959cd slateblue3
473c8b slateblue4
4876ff royalblue1
436eee royalblue2
3a5fcd royalblue3
27408b royalblue4
0000ff blue1
0000ee blue2
0000cd blue3
00008b blue4
1e90ff dodgerblue1
1c86ee dodgerblue2
1874cd dodgerblue3
104e8b dodgerblue4
63b8ff steelblue1
5cacee steelblue2
4f94cd steelblue3
36648b steelblue4
00bfff deepskyblue1
00b2ee deepskyblue2
009acd deepskyblue3
00688b deepskyblue4
87ceff skyblue1
7ec0ee skyblue2
6ca6cd skyblue3
4a708b skyblue4
b0e2ff lightskyblue1
a4d3ee lightskyblue2
8db6cd lightskyblue3
607b8b lightskyblue4
c6e2ff slategray1
b9d3ee slategray2
9fb6cd slategray3
6c7b8b slategray4
cae1ff lightsteelblue1
bcd2ee lightsteelblue2
a2b5cd lightsteelblue3
6e7b8b lightsteelblue4
bfefff lightblue1
b2dfee lightblue2
9ac0cd lightblue3
68838b lightblue4
e0ffff lightcyan1
d1eeee lightcyan2
b4cdcd lightcyan3
7a8b8b lightcyan4
bbffff paleturquoise1
aeeeee paleturquoise2
96cdcd paleturquoise3
668b8b paleturquoise4
98f5ff cadetblue1
8ee5ee cadetblue2
7ac5cd cadetblue3
53868b cadetblue4
00f5ff turquoise1
00e5ee turquoise2
00c5cd turquoise3
00868b turquoise4
00ffff cyan1
00eeee cyan2
00cdcd cyan3
008b8b cyan4
97ffff darkslategray1
8deeee darkslategray2
79cdcd darkslategray3
528b8b darkslategray4
7fffd4 aquamarine1
76eec6 aquamarine2
66cdaa aquamarine3
458b74 aquamarine4
c1ffc1 darkseagreen1
b4eeb4 darkseagreen2
9bcd9b darkseagreen3
698b69 darkseagreen4
54ff9f seagreen1
4eee94 seagreen2
43cd80 seagreen3
2e8b57 seagreen4
9aff9a palegreen1
90ee90 palegreen2
7ccd7c palegreen3
548b54 palegreen4
00ff7f springgreen1
00ee76 springgreen2
00cd66 springgreen3
008b45 springgreen4
00ff00 green1
00ee00 green2
00cd00 green3
008b00 green4
7fff00 chartreuse1
76ee00 chartreuse2
66cd00 chartreuse3
458b00 chartreuse4
c0ff3e olivedrab1
b3ee3a olivedrab2
9acd32 olivedrab3
698b22 olivedrab4
caff70 darkolivegreen1
bcee68 darkolivegreen2
a2cd5a darkolivegreen3
6e8b3d darkolivegreen4
fff68f khaki1
eee685 khaki2
cdc673 khaki3
8b864e khaki4
ffec8b lightgoldenrod1
eedc82 lightgoldenrod2
cdbe70 lightgoldenrod3
8b814c lightgoldenrod4
ffffe0 lightyellow1
eeeed1 lightyellow2
cdcdb4 lightyellow3
8b8b7a lightyellow4
ffff00 yellow1
eeee00 yellow2
cdcd00 yellow3
8b8b00 yellow4
ffd700 gold1
eec900 gold2
cdad00 gold3
8b7500 gold4
ffc125 goldenrod1
eeb422 goldenrod2
cd9b1d goldenrod3
8b6914 goldenrod4
ffb90f darkgoldenrod1
eead0e darkgoldenrod2
cd950c darkgoldenrod3
8b6508 darkgoldenrod4
ffc1c1 rosybrown1
eeb4b4 rosybrown2
cd9b9b rosybrown3
8b6969 rosybrown4
ff6a6a indianred1
ee6363 indianred2
cd5555 indianred3
8b3a3a indianred4
ff8247 sienna1
ee7942 sienna2
cd6839 sienna3
8b4726 sienna4
ffd39b burlywood1
eec591 burlywood2
cdaa7d burlywood3
8b7355 burlywood4
ffe7ba wheat1
eed8ae wheat2
cdba96 wheat3
8b7e66 wheat4
ffa54f tan1
ee9a49 tan2
cd853f tan3
8b5a2b tan4
ff7f24 chocolate1
ee7621 chocolate2
cd661d chocolate3
8b4513 chocolate4
ff3030 firebrick1
ee2c2c firebrick2
cd2626 firebrick3
8b1a1a firebrick4
ff4040 brown1
ee3b3b brown2
cd3333 brown3
8b2323 brown4
ff8c69 salmon1
ee8262 salmon2
cd7054 salmon3
8b4c39 salmon4
ffa07a lightsalmon1
ee9572 lightsalmon2
cd8162 lightsalmon3
8b5742 lightsalmon4
ffa500 orange1
ee9a00 orange2
cd8500 orange3
8b5a00 orange4
ff7f00 darkorange1
ee7600 darkorange2
cd6600 darkorange3
8b4500 darkorange4
ff7256 coral1
ee6a50 coral2
cd5b45 coral3
8b3e2f coral4
ff6347 tomato1
ee5c42 tomato2
cd4f39 tomato3
8b3626 tomato4
ff4500 orangered1
ee4000 orangered2
cd3700 orangered3
8b2500 orangered4
ff0000 red1
ee0000 red2
cd0000 red3
8b0000 red4
ff1493 deeppink1
ee1289 deeppink2
cd1076 deeppink3
8b0a50 deeppink4
ff6eb4 hotpink1
ee6aa7 hotpink2
cd6090 hotpink3
8b3a62 hotpink4
ffb5c5 pink1
eea9b8 pink2
cd919e pink3
8b636c pink4
ffaeb9 lightpink1
eea2ad lightpink2
cd8c95 lightpink3
8b5f65 lightpink4
ff82ab palevioletred1
ee799f palevioletred2
cd6889 palevioletred3
8b475d palevioletred4
ff34b3 maroon1
ee30a7 maroon2
cd2990 maroon3
8b1c62 maroon4
ff3e96 violetred1
ee3a8c violetred2
cd3278 violetred3
8b2252 violetred4
ff00ff magenta1
ee00ee magenta2
cd00cd magenta3
8b008b magenta4
ff83fa orchid1
ee7ae9 orchid2
cd69c9 orchid3
8b4789 orchid4
ffbbff plum1
eeaeee plum2
cd96cd plum3
8b668b plum4
e066ff mediumorchid1
d15fee mediumorchid2
b452cd mediumorchid3
7a378b mediumorchid4
bf3eff darkorchid1
b23aee darkorchid2
9a32cd darkorchid3
68228b darkorchid4
9b30ff purple1
912cee purple2
7d26cd purple3
551a8b purple4
ab82ff mediumpurple1
9f79ee mediumpurple2
8968cd mediumpurple3
5d478b mediumpurple4
ffe1ff thistle1
eed2ee thistle2
cdb5cd thistle3
8b7b8b thistle4
"""

# Grey ramp: level N of gray0 .. gray100 (and the grey spelling).
_GRAY_LEVELS = (
    "00 03 05 08 0a 0d 0f 12 14 17 1a 1c 1f 21 24 26 29 2b 2e 30 "
    "33 36 38 3b 3d 40 42 45 47 4a 4d 4f 52 54 57 59 5c 5e 61 63 "
    "66 69 6b 6e 70 73 75 78 7a 7d 7f 82 85 87 8a 8c 8f 91 94 96 "
    "99 9c 9e a1 a3 a6 a8 ab ad b0 b3 b5 b8 ba bd bf c2 c4 c7 c9 "
    "cc cf d1 d4 d6 d9 db de e0 e3 e5 e8 eb ed f0 f2 f5 f7 fa fc ff"
)

_TRAILING = """\
a9a9a9 dark grey
a9a9a9 darkgrey
a9a9a9 dark gray
a9a9a9 darkgray
00008b dark blue
00008b darkblue
008b8b dark cyan
008b8b darkcyan
8b008b dark magenta
8b008b darkmagenta
8b0000 dark red
8b0000 darkred
90ee90 light green
90ee90 lightgreen
"""

# "none" marks a transparent colour.
_NONE = -1


def _entries():
    for line in _NAMED.splitlines():
        value, name = line.split(" ", 1)
        yield name, int(value, 16)
    for level, byte in enumerate(_GRAY_LEVELS.split()):
        value = int(byte * 3, 16)
        yield f"gray{level}", value
        yield f"grey{level}", value
    for line in _TRAILING.splitlines():
        value, name = line.split(" ", 1)
        yield name, int(value, 16)
    yield "none", _NONE


def _build_table() -> dict[str, int]:
    table: dict[str, int] = {}
    for name, value in _entries():
        table.setdefault(name.lower(), value)
    return table


_TABLE = _build_table()


def lookup_color(name: str) -> int | None:
    """Return the 0xRRGGBB value of a colour name, ignoring case.

    "none" gives -1; an unknown name gives None.
    """
    return _TABLE.get(name.lower())