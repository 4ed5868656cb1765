import os
import csv
import sys
import time
import numpy as np

from entries import initialize_entries, get_priority
from heap_ import Heap
from logger import print_, print_error, set_verbose
from utils import by_key, is_less, is_greater, is_valid_heap

INPUT_FILENAME = "heapdrain_input.txt"
OUTPUT_FILENAME = "drained_output.csv"


class DrainParams:
    def __init__(self):
        initialize_input_parameters(self)


def parse_bool(parameter, value):
    if value == "true":
        return 1
    if value == "false":
        return 0
    raise ValueError(f"Parameter {parameter} must be true or false, got {value}")

def initialize_input_parameters(drain_params):
    drain_params.order = "min"
    drain_params.entries_from_file = 0
    drain_params.entries_filename = ""
    drain_params.n_entries = 0
    drain_params.average_priority = 0.0
    drain_params.priority_spread = 1.0
    drain_params.seed = None
    drain_params.check_invariant = 0

def read_input(drain_params, input_filename=INPUT_FILENAME):
    initialize_input_parameters(drain_params)

    with open(input_filename, "r") as input_file:
        for line in input_file:
            line = line.strip()
            if not line or line.startswith("#"):
                continue
            if "=" not in line:
                raise ValueError(f"Malformed line in {input_filename}: {line}")
            parameter, value = line.split("=", 1)
            parameter = parameter.strip()
            value = value.strip()

            if parameter == "order":
                if value not in ("min", "max"):
                    raise ValueError(f"Parameter order must be min or max, got {value}")
                drain_params.order = value
            elif parameter == "generate_entries_from_file":
                drain_params.entries_from_file = parse_bool(parameter, value)
            elif parameter == "entries_filename":
                drain_params.entries_filename = value
            elif parameter == "n_entries":
                drain_params.n_entries = int(value)
                if drain_params.n_entries < 0:
                    raise ValueError(f"Parameter n_entries must be non-negative, got {value}")
            elif parameter == "average_priority":
                drain_params.average_priority = float(value)
            elif parameter == "priority_spread":
                drain_params.priority_spread = float(value)
            elif parameter == "seed":
                drain_params.seed = int(value)
            elif parameter == "check_invariant":
                drain_params.check_invariant = parse_bool(parameter, value)
            else:
                raise ValueError(f"Unknown parameter {parameter}")

def initialize_random_generator(seed=None):
    return np.random.default_rng(seed)

def new_entry_heap(order):
    comparator = is_less if order == "min" else is_greater
    return Heap(by_key(get_priority, comparator))

def check_heap(heap, check_invariant):
    if check_invariant and not is_valid_heap(heap):
        raise RuntimeError(f"Heap invariant violated with {heap.length()} elements")

def drain_entries(entries, drain_params):
    heap = new_entry_heap(drain_params.order)
    for entry in entries:
        heap.add(entry)
        check_heap(heap, drain_params.check_invariant)

    drained = []
    for entry in heap:
        drained.append(entry)
        check_heap(heap, drain_params.check_invariant)
    return drained

def write_output(drained, output_dir_name):
    if not os.path.exists(output_dir_name):
        print_("drain.py: Cannot find the output directory. The output will be stored in the current directory.")
        output_dir_name = "./"

    output_filename = os.path.join(output_dir_name, OUTPUT_FILENAME)
    with open(output_filename, "w", newline='') as csv_drained_output:
        writer = csv.writer(csv_drained_output)
        writer.writerow(["rank", "id", "priority", "label"])
        for rank, entry in enumerate(drained):
            writer.writerow([rank, entry.id, entry.priority, entry.label])
    return output_filename

def main(argv):
    if len(argv) not in (2, 3):
        print_error("drain.py: please specify the output directory")
        return -1

    output_dir_name = argv[1]
    input_filename = argv[2] if len(argv) == 3 else INPUT_FILENAME
    drain_params = DrainParams()
    try:
        read_input(drain_params, input_filename)
    except FileNotFoundError:
        print_error(f"cannot open file <{input_filename}>.")
        return -1

    set_verbose(True)
    random_generator = initialize_random_generator(drain_params.seed)
    print_("ENTRIES INITIALIZATION")
    entries = initialize_entries(drain_params, random_generator)
    print_(f"Loaded {len(entries)} entries")

    print_("EXECUTION OF THE DRAIN")
    begin = time.time()
    drained = drain_entries(entries, drain_params)
    time_spent = time.time() - begin
    print_(f"Time consumed by drain: {time_spent:.2f} s")

    output_filename = write_output(drained, output_dir_name)
    print_(f"Drained order written to {output_filename}")
    return 0

def run():
    sys.exit(main(sys.argv))

if __name__ == "__main__":
    run()
