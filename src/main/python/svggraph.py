"""Minimal SVG bar-plot helper on top of svgwrite."""


class ConfigDict(dict):
    """A dict whose keys can also be read and set as attributes."""
    __slots__ = ()

    def __init__(self, __val__=(), subconfigs=None, **kwargs):
        dict.__init__(self, __val__)
        if subconfigs is not None:
            for path in subconfigs:
                c = self
                for part in path.split('.'):
                    c = c.setdefault(part, ConfigDict())

        self.update(kwargs)

    def __getattr__(self, key):
        return self.get(key, None)

    def __setattr__(self, key, value):
        self[key] = value


class BarPlot(object):
    """
    A plot with one bar per category along the x axis and a numeric y axis
    running from 0 to `maxy`.
    """

    def __init__(self, drawing, width, height, categories, maxy, **kwargs):
        self.d = drawing
        self.width = width
        self.height = height
        self.categories = list(categories)
        self.maxy = maxy

        self.config = ConfigDict(subconfigs=('xaxis', 'yaxis'),
                                 margin=4,
                                 fontSize=10,
                                 lineScale=1.3,
                                 tickLength=4,
                                 barSpacing=0.2)
        self.config.update(kwargs)

        self.root = self.d.g()

    def fontHeight(self):
        return self.config.fontSize * self.config.lineScale

    def innerBounds(self):
        """Return l, t, r, b"""
        leftTickLabelSize = self.config.yaxis.get('labelDepth', self.fontHeight())
        bottomTickLabelSize = self.config.xaxis.get('labelDepth', self.fontHeight())

        left = self.config.margin * 2 + self.fontHeight() + leftTickLabelSize + self.config.tickLength
        right = self.width - self.config.margin
        top = self.config.margin + self.fontHeight()
        bottom = self.height - self.config.margin - bottomTickLabelSize - self.fontHeight() * 2 - self.config.tickLength

        return left, top, right, bottom

    def slotWidth(self):
        l, t, r, b = self.innerBounds()
        return float(r - l) / max(len(self.categories), 1)

    def transformY(self, v):
        l, t, r, b = self.innerBounds()
        if self.maxy == 0:
            return b
        return b - float(b - t) / self.maxy * v

    def slot(self, i):
        """Return the left and right x coordinates of the bar for category `i`."""
        l, t, r, b = self.innerBounds()
        w = self.slotWidth()
        pad = w * self.config.barSpacing / 2
        return l + w * i + pad, l + w * (i + 1) - pad

    def drawAxes(self):
        l, t, r, b = self.innerBounds()

        self.root.add(self.d.path(('M', l, t,
                                   'L', l, b,
                                   'L', r, b), class_="border"))

    def printYTicks(self, ticks):
        """
        ticks: iterable of (value, string)
        """
        l, t, r, b = self.innerBounds()
        for v, label in ticks:
            y = self.transformY(v)
            self.root.add(self.d.line((l, y), (l - self.config.tickLength, y),
                                      class_='tick'))
            self.root.add(self.d.line((l, y), (r, y), class_='crossTick'))
            if len(label):
                pos = (l - self.config.tickLength - self.config.margin, y)
                self.root.add(self.d.text(label, pos, class_='tickLabel yaxis'))

    def printBars(self, values):
        """
        Draw one bar per category.

        values: iterable of (value, label); the label is printed above the bar.
        Returns the list of bar elements.
        """
        l, t, r, b = self.innerBounds()
        bars = []
        for i, (v, label) in enumerate(values):
            x1, x2 = self.slot(i)
            y = self.transformY(v)
            bar = self.root.add(self.d.rect((x1, y), (x2 - x1, b - y), class_='bar'))
            bars.append(bar)
            if len(label):
                self.root.add(self.d.text(label, ((x1 + x2) / 2, y - self.config.margin),
                                          class_='barLabel'))

        for i, category in enumerate(self.categories):
            x1, x2 = self.slot(i)
            pos = ((x1 + x2) / 2, b + self.config.tickLength + self.config.margin + self.fontHeight())
            t = self.root.add(self.d.text(category, pos, class_='tickLabel xaxis'))
            rotate = self.config.xaxis.get('labelRotate', 0)
            if rotate:
                t.rotate(rotate, pos)

        return bars

    def printXAxisLabel(self, label):
        self.root.add(self.d.text(label,
                                  (self.width / 2, self.height - self.config.margin),
                                  class_="axisLabel xaxis"))

    def printYAxisLabel(self, label):
        pos = (self.config.margin + self.fontHeight(), self.height / 2)
        t = self.root.add(self.d.text(label, pos, class_="axisLabel yaxis"))
        t.rotate(-90, pos)
