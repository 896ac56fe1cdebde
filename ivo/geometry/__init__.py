"""Points, edges, lines, polygons and Voronoi diagrams in 2 + 1 space-time."""