from numberline import NumberLine, NumberLineOptions, PatternLabelStrategy, SubdivisionScale

WIDTH = 120


def render(number_line: NumberLine, width: int = WIDTH) -> str:
    """Draw a view model as three lines of text, one character per pixel column."""
    view_model = number_line.build_view_model(width - 1)
    ticks = [" "] * width
    labels = [" "] * width
    for tick in view_model.tick_marks:
        column = int(round(tick.position))
        ticks[column] = "|" if tick.height == view_model.max_height else ("+" if tick.height > 1 else ".")
        if tick.label is not None:
            for offset, char in enumerate(tick.label):
                if column + offset < width:
                    labels[column + offset] = char
    header = f"magnification={number_line.magnification:.3f} unit={number_line.unit_value:g}/{number_line.unit_length:.1f}px"
    return "\n".join([header, "".join(ticks), "".join(labels)])


if __name__ == "__main__":
    number_line = NumberLine(NumberLineOptions(
        pattern=[3, 1, 1, 1, 1, 2, 1, 1, 1, 1],
        breakpoint_lower_bound=40,
        breakpoint_upper_bound=60,
        scale=SubdivisionScale(base_unit_value=1000, subdivision_fallout=[200, 100, 50, 20, 10], maximum_length_of_last_subdivision=100),
        label_strategy=PatternLabelStrategy((0,)),
    ))
    number_line.pan_to(-10)

    session = number_line.zoom_session()
    anchor = 30
    while True:
        print(render(number_line))
        print()
        if not session.zoom_around(number_line.value_at(anchor), anchor, 1.5):
            break
