"""Command handlers of the interactive scanner and the table that names them."""