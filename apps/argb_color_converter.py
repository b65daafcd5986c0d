# /// script
# requires-python = ">=3.12"
# dependencies = [
#     "marimo",
#     "loguru==0.7.3",
# ]
#
# [tool.marimo.display]
# theme = "system"
# ///

"""
ARGB Color Converter

Convert between channel, integer and hexadecimal ARGB color values.
Every field edits the same color; the other fields follow.
"""

import marimo

__generated_with = "0.19.4"
app = marimo.App(app_title="ARGB Color Converter")

with app.setup:
    import sys

    import loguru
    import marimo as mo


@app.cell
def imports():
    # Modules will be auto-inlined by the build script
    from modules.color.argb.config import CONFIG, URL_PARAMS
    from modules.color.argb.model import CHANNELS
    from modules.color.argb.presets import PRESETS
    from modules.color.argb.form.state import with_signed
    from modules.color.argb.form.edit_channel import set_channel_and_sync
    from modules.color.argb.form.edit_packed import set_packed_text
    from modules.color.argb.form.edit_hex import set_hex_text
    from modules.color.argb.form.apply_preset import apply_preset
    from modules.color.argb.form.url_state import parse_url_state, share_query_string
    from modules.html.swatch import preview_swatch, preset_swatch
    from modules.html.tags import link
    return (
        CHANNELS,
        CONFIG,
        PRESETS,
        URL_PARAMS,
        apply_preset,
        link,
        parse_url_state,
        preset_swatch,
        preview_swatch,
        set_channel_and_sync,
        set_hex_text,
        set_packed_text,
        share_query_string,
        with_signed,
    )


@app.cell
def logging_setup(CONFIG):
    loguru.logger.remove()
    loguru.logger.add(sys.stderr, level=CONFIG["log_level"])
    return


@app.cell
def title(CONFIG, link):
    mo.md(f"""
    # {CONFIG["app_name"]}

    Convert between integer and hexadecimal ARGB color values.
    Useful for Android development.

    For more details, see the {link(CONFIG["docs_url"], "Android Color Documentation")}.
    """)
    return


@app.cell
def form_state(URL_PARAMS, parse_url_state):
    _params = mo.query_params()
    get_form, set_form = mo.state(
        parse_url_state({key: _params.get(key) for key in URL_PARAMS if key in _params})
    )
    return get_form, set_form


@app.cell
def preview(get_form, preview_swatch):
    mo.Html(preview_swatch(get_form().color))
    return


@app.cell
def channel_sliders(CHANNELS, get_form, set_channel_and_sync, set_form):
    _color = get_form().color

    def _slider(channel):
        return mo.ui.slider(
            start=0,
            stop=255,
            step=1,
            value=getattr(_color, channel),
            label=channel.title(),
            on_change=lambda value: set_form(
                lambda state: set_channel_and_sync(state, channel, value)
            ),
        )

    sliders = mo.ui.array([_slider(channel) for channel in CHANNELS])
    return (sliders,)


@app.cell
def channel_numbers(CHANNELS, get_form, set_channel_and_sync, set_form):
    _color = get_form().color

    def _number(channel):
        return mo.ui.number(
            start=0,
            stop=255,
            step=1,
            value=getattr(_color, channel),
            on_change=lambda value: set_form(
                lambda state: set_channel_and_sync(state, channel, value)
            ),
        )

    numbers = mo.ui.array([_number(channel) for channel in CHANNELS])
    return (numbers,)


@app.cell
def integer_field(get_form, set_form, set_packed_text):
    def _on_int(value):
        _current = get_form()
        _next = set_packed_text(_current, value)
        # Rejected text keeps the field as typed
        if _next != _current:
            set_form(_next)

    int_input = mo.ui.text(
        value=get_form().int_text,
        label="Integer Color",
        on_change=_on_int,
    )
    return (int_input,)


@app.cell
def signed_switch(get_form, set_form, with_signed):
    signed_toggle = mo.ui.switch(
        value=get_form().signed,
        label="Signed (Android @ColorInt)",
        on_change=lambda value: set_form(lambda state: with_signed(state, value)),
    )
    return (signed_toggle,)


@app.cell
def hex_field(get_form, set_form, set_hex_text):
    hex_input = mo.ui.text(
        value=get_form().hex_text,
        label="HEX Color",
        on_change=lambda value: set_form(lambda state: set_hex_text(state, value)),
    )
    return (hex_input,)


@app.cell
def controls(CHANNELS, hex_input, int_input, numbers, signed_toggle, sliders):
    mo.vstack(
        [
            *[
                mo.hstack([sliders[_i], numbers[_i]], justify="start", gap=1)
                for _i in range(len(CHANNELS))
            ],
            mo.hstack([int_input, signed_toggle], justify="start", gap=2),
            hex_input,
        ]
    )
    return


@app.cell
def presets(PRESETS, apply_preset, set_form):
    preset_buttons = mo.ui.array(
        [
            mo.ui.button(
                label=preset.name,
                on_click=lambda _, preset=preset: set_form(
                    lambda state: apply_preset(state, preset)
                ),
            )
            for preset in PRESETS
        ]
    )
    return (preset_buttons,)


@app.cell
def presets_view(PRESETS, preset_buttons, preset_swatch):
    mo.vstack(
        [
            mo.md("## Presets"),
            mo.hstack(
                [
                    mo.hstack(
                        [mo.Html(preset_swatch(_preset.color)), preset_buttons[_i]],
                        gap=0.25,
                    )
                    for _i, _preset in enumerate(PRESETS)
                ],
                wrap=True,
                justify="start",
            ),
        ]
    )
    return


@app.cell
def share_link(get_form, share_query_string):
    _form = get_form()
    mo.md(f"""
    **Current:** `{_form.hex}` · `{_form.int_text}` · `{_form.css}`

    Link to this color: `{share_query_string(_form)}`
    """)
    return


if __name__ == "__main__":
    app.run()
