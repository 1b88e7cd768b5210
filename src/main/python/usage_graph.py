import math
import svgwrite
import svggraph

height = 350
width_per_version = 60
min_width = 300


def float_xrange(start, stop, step):
    c = start
    while c < stop:
        yield c
        c += step


def produce_graph(collected, label, fd):
    """
    Write an SVG bar chart of the user share of each bucket to `fd`.

    `collected` is the sorted list returned by versionreport.summarize.
    """
    graph_width = max(min_width, len(collected) * width_per_version + 100)
    maxpct = max(b.fraction * 100 for b in collected)
    tickstep = 10 if maxpct > 20 else 2
    top = math.ceil(maxpct / tickstep) * tickstep

    d = svgwrite.Drawing(id='graphRoot',
                         viewBox='0 0 %s %s' % (graph_width, height),
                         debug=False)
    d['width'] = str(graph_width)
    d['height'] = str(height)
    plot = svggraph.BarPlot(d, graph_width, height,
                            [str(b.version.major) for b in collected],
                            top)
    plot.config.yaxis.labelDepth = 30
    d.add(plot.root)

    plot.printYTicks((t, "%i%%" % t) for t in float_xrange(0, top + tickstep, tickstep))
    bars = plot.printBars((b.fraction * 100, "%.1f%%" % (b.fraction * 100))
                          for b in collected)
    for bar, b in zip(bars, collected):
        bar['data-version'] = str(b.version)
        bar['data-users'] = str(b.users)
        bar['data-new-users'] = str(b.new_users)
        bar['data-sessions'] = str(b.engaged_sessions)

    plot.drawAxes()
    plot.printXAxisLabel(label)
    plot.printYAxisLabel("% of users")

    d.add(d.style("""
    svg {
      font-family: sans-serif;
    }
    .border {
      stroke: black;
      stroke-width: 2;
      fill: none;
    }
    .tick {
      stroke: black;
      stroke-width: 2;
    }
    .crossTick {
      stroke: #444;
      stroke-width: 1;
    }
    .tickLabel,
    .axisLabel,
    .barLabel {
      fill: black;
      font-size: %(fontSize)dpt;
    }
    .axisLabel {
      font-weight: bold;
      text-anchor: middle;
    }
    .tickLabel {
      dominant-baseline: middle;
    }
    .tickLabel.xaxis,
    .barLabel {
      text-anchor: middle;
    }
    .tickLabel.yaxis {
      text-anchor: end;
    }
    .bar {
      fill: #5D3799;
    }
    .bar:hover {
      fill: #9b5cff;
    }
""" % {'fontSize': plot.config.fontSize}))

    d.write(fd)
