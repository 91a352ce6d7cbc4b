import typer
from pathlib import Path
from omegaconf import OmegaConf
from board_intel.config.loader import load_cfg
from board_intel.errors import BoardIntelError
from board_intel.graph.build_graph import assign_net_ids, build_connectivity_graph
from board_intel.graph.exporters import export_graph
from board_intel.pipeline import analyze_file
from board_intel.schema.serialization import export_components_csv, load_result_json, write_result_json
from board_intel.schematic.svg import export_svg
from board_intel.utils.io import ensure_dir
from board_intel.utils.logging import setup_logging
from board_intel.utils.validators import check_referential_closure

app = typer.Typer(help="Board image → components, netlist, behavior and schematic.")

def _canvas_kwargs(cfg) -> dict:
    c = OmegaConf.to_container(cfg.schematic.canvas, resolve=True)
    return {"width": c["width"], "height": c["height"], "grid": c["grid"], "draw_grid": c["draw_grid"]}

@app.command()
def analyze(image: Path,
            out: Path = typer.Option(None, "--out", help="Output directory (default: <exports>/<image stem>)"),
            svg: bool = typer.Option(True, "--svg/--no-svg"),
            graphml: bool = typer.Option(True, "--graphml/--no-graphml")):
    """Analyze one board image and write result.json, components.csv, graph.json and schematic.svg."""
    cfg = load_cfg()
    log = setup_logging(cfg.logging.level)
    out_dir = ensure_dir(out or Path(cfg.paths.exports) / image.stem)

    try:
        result = analyze_file(image, cfg)
    except BoardIntelError as e:
        log.error(f"[cli] {e}")
        raise typer.Exit(code=1)

    for problem in check_referential_closure(result):
        log.warning(f"[cli] {problem}")

    write_result_json(result, out_dir / "result.json")
    export_components_csv(result, out_dir / "components.csv")

    G = build_connectivity_graph(result.components, result.traces, result.analysis.connections,
                                 width=result.width, height=result.height)
    assign_net_ids(G, result.analysis.netlist)
    export_graph(G, out_dir, stem="graph",
                 write_graphml=graphml and bool(cfg.graph.export.write_graphml))

    if svg:
        export_svg(result.schematic, out_dir / "schematic.svg", **_canvas_kwargs(cfg))

    s = result.summary
    log.info(f"[cli] {s.component_count} components, {s.type_count} types, "
             f"{s.circuit_type}: {', '.join(s.functions)} (~{s.total_power_mw}mW)")
    typer.echo(str(out_dir))

@app.command()
def render(result_json: Path, out_svg: Path):
    """Re-render the schematic of a saved result.json."""
    cfg = load_cfg()
    setup_logging(cfg.logging.level)
    result = load_result_json(result_json)
    export_svg(result.schematic, out_svg, **_canvas_kwargs(cfg))
    typer.echo(str(out_svg))

if __name__ == "__main__":
    app()
