from rdflib import Namespace

FORMATS = Namespace("http://www.w3.org/ns/formats/")
