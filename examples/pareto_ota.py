"""Example how to size the five transistor OTA and compare the search algorithms."""
# python libraries
import os

# own libraries
import asct

# 3rd party libraries

ota = asct.get_sample_circuit("five_transistor_ota")
graph_data = asct.create_graph_data(ota.netlist, ota.ports)

constraints = asct.Constraints(max_power="2", max_noise="")
history = asct.RunHistory()

for algorithm in [asct.AlgorithmEnum.genetic_algorithm, asct.AlgorithmEnum.simulated_annealing]:
    hyperparameters = asct.Hyperparameters(
        algorithm=algorithm,
        iterations=200,
        population_size=100,
        random_seed=42,
        sampling_method=asct.SamplingEnum.latin_hypercube,
        search_mode=asct.SearchModeEnum.single_shot
    )

    result = asct.run_optimization(graph_data.components, asct.OptimizationTarget.gain, constraints, hyperparameters)
    history.add(asct.OptimizationTarget.gain, constraints, result.pareto_front)

    selected_point = asct.select_representative_point(result.pareto_front)
    print(f"{algorithm.value}: {len(result.pareto_front)} of {len(result.all_points)} points on the Pareto front.")
    if selected_point is not None:
        print(f"    selected {selected_point.id}: {selected_point.metrics}")
        print(asct.export_to_cir(selected_point.components))

    asct.save_results(result, os.path.join(os.curdir, "example_results"), f"ota_{algorithm.value}", selected_point)

# recall the first run
entry, selected_point = history.revert(history.entries()[-1].id)
print(f"Run {entry.id} ({entry.target.value}, {entry.timestamp:%H:%M:%S}) selected {selected_point.id if selected_point else None}")
