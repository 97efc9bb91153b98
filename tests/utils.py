SAMPLE_PAYLOAD = (
    "<PURCHASES><PURCHASE><RESULT><ACTIONS><ORDERED>"
    '<ACTION name="spin" window="0,0,1;0,1,2" mask="1"/>'
    '<ACTION name="move"><STEP pos="1,1" prev-pos="0,0" sym="a" win="5"/></ACTION>'
    "</ORDERED></ACTIONS></RESULT></PURCHASE></PURCHASES>"
)

SAMPLE_REPLAY = (
    "<response><game><pubdata><![CDATA["
    + SAMPLE_PAYLOAD
    + "]]></pubdata></game></response>"
)


def grid_cells(rendering, height=8):
    """Return the cells of a path rendering as rows of glyphs."""
    lines = rendering.split("\n")
    return [line[2:-1].split() for line in lines[2:2 + height]]
