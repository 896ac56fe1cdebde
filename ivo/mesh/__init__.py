"""Space-time prismatic elements and their neighbour records."""