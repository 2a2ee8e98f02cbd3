x = [1, 2]
