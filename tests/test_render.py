from countrytable.render import Cell, HtmlTableTarget, TableRenderer, flag_src


def test_flag_src_uses_lower_case_code():
    assert flag_src("CA") == "flags/ca.png"
    assert flag_src("GB", "/img/flags/{code}.png") == "/img/flags/gb.png"


def test_row_for_builds_cells_in_column_order(engine, renderer, target):
    canada = engine.by_language("English")[0]

    row = renderer.row_for(canada)

    assert row.cells[0] == Cell("flags/ca.png", kind="image")
    assert row.texts[1:] == ["CA", "Canada", "Americas", "9984670", "36624199", "Ottawa"]
    assert target.rows == []


def test_render_keeps_input_order(engine, renderer, target):
    countries = engine.by_population(1000000, 2000000)

    count = renderer.render(countries)

    assert count == 2
    assert [row[1].text for row in target.rows] == ["EE", "BH"]
    for row, country in zip(target.rows, countries):
        assert [c.value for c in row[1:]] == [
            country.code, country.name, country.continent,
            country.area_in_km2, country.population, country.capital,
        ]


def test_render_replaces_previous_rows(engine, renderer, target):
    renderer.render(engine.by_language())
    assert len(target.rows) == 6

    renderer.render([])
    assert target.rows == []

    renderer.clear()
    assert target.rows == []


def test_missing_name_renders_empty_cell(engine, renderer, target):
    renderer.render(engine.by_language("Korean"))

    assert target.rows[0][2].text == "캐나다"
    assert target.rows[1][2].text == ""


def test_html_output_escapes_text(renderer, target):
    target.set_caption("Countries <all>")
    target.append_row([Cell("flags/x.png", kind="image"), Cell("XX"), Cell("A & B")])

    out = target.to_html()

    assert "<caption>Countries &lt;all&gt;</caption>" in out
    assert "<td>A &amp; B</td>" in out
    assert '<img src="flags/x.png"' in out
    assert out.count("<tr>") == 2


def test_custom_flag_template(engine):
    target = HtmlTableTarget()
    renderer = TableRenderer(target, flag_template="/img/{code}.svg")

    renderer.render(engine.by_area_and_continent("Asia", 0))

    assert [row[0].value for row in target.rows] == ["/img/in.svg", "/img/bh.svg"]


def test_default_flag_template_points_at_flag_cdn():
    from countrytable import config

    assert flag_src("CA", config.DEFAULT_FLAG_URL_TEMPLATE) == "https://flagcdn.com/w40/ca.png"
