"""The ebisp Lisp: tokenizer, reader, evaluator, standard library, collector and REPL."""